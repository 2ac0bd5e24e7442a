import bcrypt


class PasswordHasher:
    def __init__(self, rounds=12):
        self.rounds = rounds

    def hash(self, password):
        # Stored as text since the collections are JSON
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password, hashed):
        if not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            # Not a bcrypt hash
            return False
