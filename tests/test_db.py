import boto3
import psycopg2
import pytest

from items_api import db


class _FakeRdsClient:
    def __init__(self):
        self.token_requests = []

    def generate_db_auth_token(self, **kwargs):
        self.token_requests.append(kwargs)
        return f"token-{len(self.token_requests)}"


@pytest.fixture
def rds(monkeypatch):
    client = _FakeRdsClient()
    created = []

    def fake_client(service, **kwargs):
        created.append((service, kwargs))
        return client

    monkeypatch.setattr(boto3, "client", fake_client)
    client.created = created
    return client


@pytest.fixture
def connects(monkeypatch):
    calls = []

    def fake_connect(**kwargs):
        calls.append(kwargs)
        return object()

    monkeypatch.setattr(psycopg2, "connect", fake_connect)
    return calls


class TestCreateAppEngine:
    def test_passwordless_postgres_with_region_uses_iam_creator(self, monkeypatch):
        captured = {}

        def fake_creator(**kwargs):
            captured.update(kwargs)
            return lambda: None

        monkeypatch.setenv("AWS_REGION", "eu-west-1")
        monkeypatch.delenv("PGSSLMODE", raising=False)
        monkeypatch.setattr(db, "_iam_connection_creator", fake_creator)

        engine = db.create_app_engine("postgresql+psycopg2://app@db.example.com/items")

        assert engine.dialect.name == "postgresql"
        assert captured == {
            "host": "db.example.com",
            "port": 5432,
            "user": "app",
            "database": "items",
            "region": "eu-west-1",
            "sslmode": "require",
        }

    def test_sslmode_from_url_query(self, monkeypatch):
        captured = {}
        monkeypatch.setenv("AWS_REGION", "us-east-1")
        monkeypatch.setattr(db, "_iam_connection_creator", lambda **kw: captured.update(kw) or (lambda: None))

        db.create_app_engine("postgresql+psycopg2://app@db:6543/items?sslmode=verify-full")

        assert captured["port"] == 6543
        assert captured["sslmode"] == "verify-full"

    @pytest.mark.parametrize(
        "url",
        [
            "postgresql+psycopg2://app:secret@db/items",
            "sqlite:///:memory:",
        ],
    )
    def test_plain_url_skips_iam(self, monkeypatch, url):
        monkeypatch.setenv("AWS_REGION", "eu-west-1")

        def unexpected(**kwargs):
            raise AssertionError("IAM creator should not be used")

        monkeypatch.setattr(db, "_iam_connection_creator", unexpected)
        assert db.create_app_engine(url).url.render_as_string(hide_password=False) == url

    def test_no_region_skips_iam(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.setattr(db, "_iam_connection_creator", lambda **kw: pytest.fail("IAM used"))

        engine = db.create_app_engine("postgresql+psycopg2://app@db/items")
        assert engine.url.host == "db"


class TestIamConnectionCreator:
    def test_token_is_used_as_password(self, rds, connects):
        creator = db._iam_connection_creator(
            host="db.example.com",
            port=5432,
            user="app",
            database="items",
            region="eu-west-1",
            sslmode="require",
        )

        creator()

        assert rds.created == [("rds", {"region_name": "eu-west-1"})]
        assert rds.token_requests == [
            {"DBHostname": "db.example.com", "Port": 5432, "DBUsername": "app", "Region": "eu-west-1"}
        ]
        assert connects == [
            {
                "host": "db.example.com",
                "port": 5432,
                "user": "app",
                "password": "token-1",
                "dbname": "items",
                "sslmode": "require",
            }
        ]

    def test_fresh_token_per_connection(self, rds, connects):
        creator = db._iam_connection_creator(
            host="h", port=5432, user="u", database="d", region="r", sslmode="require"
        )

        creator()
        creator()

        assert [c["password"] for c in connects] == ["token-1", "token-2"]
