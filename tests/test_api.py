import unittest

from ideai.config.db import memory_db
from ideai.config.settings import Settings
from ideai.server import create_app
from tests.helpers import DEMO_PROJECTS

ADA = {
    "firstname": "Ada",
    "lastname": "L",
    "username": "ada",
    "email": "ada@x.com",
    "password": "secret1",
    "userType": "entrepreneur",
}


class ApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self.db = memory_db()
        app = create_app(Settings(bcrypt_rounds=4), db=self.db, demo_projects=DEMO_PROJECTS)
        app.testing = True
        self.client = app.test_client()

    def _signup(self, **overrides):
        return self.client.post("/api/signup", json={**ADA, **overrides})

    def _project(self, **fields):
        body = {"title": "T", "description": "D", "username": "ada", **fields}
        return self.client.post("/api/projects", json=body).get_json()["project"]

    def test_root(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.get_json()["success"])

    def test_signup_and_login(self) -> None:
        resp = self._signup()
        self.assertEqual(resp.status_code, 200)
        body = resp.get_json()
        self.assertTrue(body["success"])
        self.assertEqual(body["user"]["username"], "ada")
        self.assertEqual(body["user"]["firstname"], "Ada")
        self.assertEqual(body["user"]["userType"], "entrepreneur")
        self.assertIn("id", body["user"])
        self.assertNotIn("password", body["user"])

        resp = self.client.post("/api/login", json={"usernameOrEmail": "ada@x.com", "password": "secret1"})
        self.assertEqual(resp.status_code, 200)
        self.assertIn("profile", resp.get_json()["user"])

    def test_signup_errors(self) -> None:
        resp = self._signup(email="not-an-email")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Please enter a valid email address."})

        self._signup()
        resp = self._signup(email="other@x.com")
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.get_json()["message"], "Username already exists.")
        self.assertEqual(len(self.db.users.load()), 1)

    def test_login_errors(self) -> None:
        self._signup()
        resp = self.client.post("/api/login", json={"usernameOrEmail": "bob", "password": "secret1"})
        self.assertEqual(resp.status_code, 404)
        resp = self.client.post("/api/login", json={"usernameOrEmail": "ada", "password": "nope-nope"})
        self.assertEqual(resp.status_code, 401)
        resp = self.client.post("/api/login", json={})
        self.assertEqual(resp.status_code, 400)

    def test_profile_get_update_and_list_users(self) -> None:
        self._signup()
        self.client.put("/api/user/ada", json={"profile": {"skills": ["go"]}})
        resp = self.client.put("/api/user/ada", json={"profile": {"bio": "x"}})
        self.assertEqual(resp.get_json(), {"success": True, "message": "Profile updated successfully!"})

        user = self.client.get("/api/user/ada").get_json()["user"]
        self.assertEqual(user["profile"]["bio"], "x")
        self.assertEqual(user["profile"]["skills"], ["go"])
        self.assertNotIn("password", user)

        self.assertEqual(self.client.get("/api/user/bob").status_code, 404)
        self.assertEqual(self.client.put("/api/user/bob", json={"profile": {}}).status_code, 404)

        users = self.client.get("/api/users").get_json()["users"]
        self.assertEqual([u["username"] for u in users], ["ada"])

    def test_project_lifecycle(self) -> None:
        self._signup()
        self._signup(username="bob", email="bob@x.com", userType="investor")
        project = self._project()
        self.assertEqual(project["category"], "tech")
        self.assertEqual(project["funding"], 0)
        self.assertIs(project["lookingForInvestment"], False)

        resp = self.client.get(f"/api/projects/{project['id']}")
        self.assertEqual(resp.get_json()["project"]["id"], project["id"])

        for _ in range(3):
            resp = self.client.post(f"/api/projects/{project['id']}/like")
        self.assertEqual(resp.get_json()["likes"], 3)

        resp = self.client.delete(f"/api/projects/{project['id']}?username=bob")
        self.assertEqual(resp.status_code, 403)
        resp = self.client.delete(f"/api/projects/{project['id']}")
        self.assertEqual(resp.status_code, 400)
        resp = self.client.delete(f"/api/projects/{project['id']}?username=ada")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get(f"/api/projects/{project['id']}").status_code, 404)
        self.assertEqual(self.client.post(f"/api/projects/{project['id']}/like").status_code, 404)

    def test_project_list_filter(self) -> None:
        self.db.projects.save([
            {"id": "1", "category": "health", "creator": "ada", "createdAt": "2024-01-01T09:00:00.000Z"},
            {"id": "2", "category": "tech", "creator": "ada", "createdAt": "2024-01-02T09:00:00.000Z"},
            {"id": "3", "category": "health", "creator": "bob", "createdAt": "2024-01-03T09:00:00.000Z"},
        ])
        projects = self.client.get("/api/projects?category=health").get_json()["projects"]
        self.assertEqual([p["id"] for p in projects], ["3", "1"])
        self.assertTrue(all(p["category"] == "health" for p in projects))
        projects = self.client.get("/api/projects?category=health&creator=ada").get_json()["projects"]
        self.assertEqual([p["id"] for p in projects], ["1"])

    def test_create_project_validation(self) -> None:
        resp = self.client.post("/api/projects", json={"title": "T"})
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.get_json()["success"])

    def test_favorites(self) -> None:
        self._signup()
        project = self._project()
        resp = self.client.post("/api/favorites", json={"username": "ada", "projectId": "demo-1"})
        self.assertEqual(resp.status_code, 200)
        self.client.post("/api/favorites", json={"username": "ada", "projectId": project["id"]})

        resp = self.client.post("/api/favorites", json={"username": "ada", "projectId": "demo-1"})
        self.assertEqual(resp.status_code, 409)
        resp = self.client.post("/api/favorites", json={"username": "ada", "projectId": "missing"})
        self.assertEqual(resp.status_code, 404)

        favorites = self.client.get("/api/favorites/ada").get_json()["favorites"]
        self.assertEqual([p["id"] for p in favorites], [project["id"], "demo-1"])

        resp = self.client.delete("/api/favorites/demo-1?username=ada")
        self.assertEqual(resp.get_json()["favorites"], [project["id"]])
        resp = self.client.delete("/api/favorites/demo-1?username=ada")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get("/api/favorites/bob").status_code, 404)

    def test_non_object_body_is_rejected(self) -> None:
        self._signup()
        requests = [
            ("post", "/api/signup"),
            ("post", "/api/login"),
            ("put", "/api/user/ada"),
            ("post", "/api/projects"),
            ("post", "/api/favorites"),
        ]
        for method, path in requests:
            for body in (["x"], "text", 5):
                resp = getattr(self.client, method)(path, json=body)
                self.assertEqual(resp.status_code, 400, path)
                self.assertEqual(resp.get_json(),
                                 {"success": False, "message": "Request body must be a JSON object."})
        self.assertEqual(len(self.db.users.load()), 1)
        self.assertEqual(self.db.projects.load(), [])

    def test_create_project_rejects_string_flag(self) -> None:
        self._signup()
        resp = self.client.post("/api/projects", json={
            "title": "T", "description": "D", "username": "ada", "lookingForInvestment": "false",
        })
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.db.projects.load(), [])

    def test_unknown_route(self) -> None:
        resp = self.client.get("/api/nothing-here")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Route not found."})

    def test_storage_failure_is_internal_error(self) -> None:
        def broken_save(records):
            raise OSError("disk full")

        self.db.users.save = broken_save
        with self.assertLogs("ideai.routes.common", level="ERROR"):
            resp = self._signup()
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Internal server error."})


if __name__ == "__main__":
    unittest.main()
