import pytest

from main import app as flask_app


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c


@pytest.fixture
def tree_text():
    return """graph TD
    Root((Root)) --> A[Branch A]
    Root --> B[Branch B]
    A --> A1[Leaf A1]
    A --> A2[Leaf A2]
    B --> B1[Leaf B1]
    B --> B2[Leaf B2]"""
