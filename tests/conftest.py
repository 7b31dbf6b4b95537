import os
import sys
import tempfile

import pytest
from fastapi.testclient import TestClient

# Ensure project root in path
current_dir = os.path.dirname(__file__)
project_root = os.path.abspath(os.path.join(current_dir, ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Settings are read at import time, so the environment must be in place first
_tmp_dir = tempfile.mkdtemp(prefix="quickcart-tests-")
os.environ["JWT_SECRET"] = "secret"
os.environ["APP_ENV"] = "development"
os.environ["EXPOSE_RESET_CODE"] = "false"
os.environ["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{os.path.join(_tmp_dir, 'app.db')}"
os.environ["LOGS_DIR"] = os.path.join(_tmp_dir, "logs")
os.environ["RESEND_API_KEY"] = ""
os.environ["EMAIL_USER"] = ""
os.environ["EMAIL_PASS"] = ""
os.environ["ADMIN_EMAIL"] = ""

from fakes import RecordingSender  # noqa: E402


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def make_client(sender):
    """Build a TestClient over a fresh schema.

    Accepts an optional reset registry and list of email senders; by default
    the app gets a new in-memory registry and the ``sender`` fixture.
    """
    from api.db import engine  # type: ignore
    from api.models import Base  # type: ignore
    from api.main import create_app  # type: ignore
    from recovery.mail import EmailDispatcher  # type: ignore

    def _make(registry=None, senders=None):
        Base.metadata.drop_all(bind=engine)
        app = create_app(
            reset_registry=registry,
            email_dispatcher=EmailDispatcher(senders if senders is not None else [sender]),
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    return make_client()

