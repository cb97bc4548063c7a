"""End-to-end tests for post creation and traversal endpoints."""

import pytest
from fastapi.testclient import TestClient

from forum.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client with a user, a forum and a thread 'treasure' (id 1)."""
    client = TestClient(create_app(build_test_container()))
    client.post(
        "/api/user/alice/create",
        json={"fullname": "Alice", "about": "", "email": "alice@example.org"},
    )
    client.post(
        "/api/forum/create",
        json={"slug": "pirates", "title": "Pirates", "user": "alice"},
    )
    client.post(
        "/api/forum/pirates/create",
        json={"author": "alice", "title": "T", "message": "M", "slug": "treasure"},
    )
    return client


def post(message: str, parent: int = 0) -> dict:
    return {"author": "alice", "message": message, "parent": parent}


def messages(response) -> list[str]:
    assert response.status_code == 200
    return [p["message"] for p in response.json()]


@pytest.fixture
def tree(client):
    """A(1) with reply B(2) and grandchild D(4); root C(3) with reply E(5)."""
    client.post("/api/thread/treasure/create", json=[post("A"), post("B", 1), post("C")])
    client.post("/api/thread/1/create", json=[post("D", 2), post("E", 3)])
    return client


class TestCreatePosts:
    """Tests for POST /api/thread/{slug_or_id}/create."""

    def test_batch_response(self, client):
        response = client.post(
            "/api/thread/treasure/create", json=[post("A"), post("B", 1)]
        )

        assert response.status_code == 201
        body = response.json()
        assert [p["id"] for p in body] == [1, 2]
        assert body[0]["parent"] is None
        assert body[1]["parent"] == 1
        assert body[0]["isEdited"] is False
        assert body[0]["thread"] == 1
        assert body[0]["forum"] == "pirates"
        assert body[0]["created"] == body[1]["created"]

    def test_empty_batch(self, client):
        response = client.post("/api/thread/treasure/create", json=[])

        assert response.status_code == 201
        assert response.json() == []

    def test_unknown_thread(self, client):
        response = client.post("/api/thread/nowhere/create", json=[])

        assert response.status_code == 404

    def test_bad_parent_is_conflict_and_nothing_is_kept(self, client):
        batch = [post(str(i)) for i in range(5)] + [post("orphan", 999)]

        response = client.post("/api/thread/treasure/create", json=batch)

        assert response.status_code == 409
        assert client.get("/api/thread/treasure/posts").json() == []
        assert client.get("/api/service/status").json()["post"] == 0

    def test_unknown_author(self, client):
        response = client.post(
            "/api/thread/treasure/create",
            json=[{"author": "ghost", "message": "Boo"}],
        )

        assert response.status_code == 404


class TestListPosts:
    """Tests for GET /api/thread/{slug_or_id}/posts."""

    def test_flat(self, tree):
        assert messages(tree.get("/api/thread/1/posts")) == ["A", "B", "C", "D", "E"]
        assert messages(
            tree.get("/api/thread/1/posts", params={"desc": "true", "limit": 2})
        ) == ["E", "D"]

    def test_tree(self, tree):
        assert messages(
            tree.get("/api/thread/treasure/posts", params={"sort": "tree"})
        ) == ["A", "B", "D", "C", "E"]
        assert messages(
            tree.get(
                "/api/thread/treasure/posts",
                params={"sort": "tree", "since": 4, "limit": 1},
            )
        ) == ["C"]

    def test_parent_tree(self, tree):
        assert messages(
            tree.get(
                "/api/thread/treasure/posts",
                params={"sort": "parent_tree", "limit": 1},
            )
        ) == ["A", "B", "D"]
        assert messages(
            tree.get(
                "/api/thread/treasure/posts",
                params={"sort": "parent_tree", "desc": "true"},
            )
        ) == ["C", "E", "A", "B", "D"]

    @pytest.mark.parametrize("sort", ["flat", "tree", "parent_tree"])
    def test_zero_since_starts_from_the_beginning(self, tree, sort):
        params = {"sort": sort, "limit": 2}

        first_page = tree.get("/api/thread/1/posts", params=params)
        from_zero = tree.get("/api/thread/1/posts", params={**params, "since": 0})

        assert messages(from_zero) == messages(first_page)

    def test_negative_since_rejected(self, tree):
        response = tree.get("/api/thread/1/posts", params={"since": -1})

        assert response.status_code == 422

    def test_unknown_cursor(self, tree):
        response = tree.get(
            "/api/thread/treasure/posts", params={"sort": "tree", "since": 99}
        )

        assert response.status_code == 404

    def test_unknown_thread_and_bad_sort(self, tree):
        assert tree.get("/api/thread/nowhere/posts").status_code == 404
        assert (
            tree.get("/api/thread/1/posts", params={"sort": "random"}).status_code
            == 422
        )


class TestPostDetails:
    """Tests for /api/post/{id}/details."""

    def test_details_with_related(self, tree):
        bare = tree.get("/api/post/2/details")
        full = tree.get("/api/post/2/details", params={"related": "user,thread,forum"})

        assert set(bare.json()) == {"post"}
        assert bare.json()["post"]["parent"] == 1
        assert full.json()["author"]["nickname"] == "alice"
        assert full.json()["thread"]["slug"] == "treasure"
        assert full.json()["forum"]["posts"] == 5

    def test_unknown_related_rejected(self, tree):
        response = tree.get("/api/post/2/details", params={"related": "planet"})

        assert response.status_code == 422

    def test_edit_message(self, tree):
        same = tree.post("/api/post/1/details", json={"message": "A"})
        edited = tree.post("/api/post/1/details", json={"message": "A!"})

        assert same.json()["isEdited"] is False
        assert edited.json()["isEdited"] is True
        assert edited.json()["message"] == "A!"
        assert tree.get("/api/post/99/details").status_code == 404
