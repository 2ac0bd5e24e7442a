"""Backend for the IDEAI startup and investor matchmaking site."""
