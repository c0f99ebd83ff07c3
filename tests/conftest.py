"""Pytest configuration and fixtures."""

import json
from datetime import datetime

import pytest
from google.cloud import vision
from google.oauth2.credentials import Credentials

from vision_ocr.auth import TokenCache
from vision_ocr.utils.logger import reset_logger

TOKEN_URI = "https://oauth2.googleapis.com/token"
CLIENT_ID = "1234-test.apps.googleusercontent.com"
CLIENT_SECRET = "test-secret"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep flag defaults and logger handlers from leaking between tests."""
    for name in (
        "VISION_OCR_SERVICE_ACCOUNT",
        "VISION_OCR_CLIENT_ID",
        "VISION_OCR_INPUT",
        "VISION_OCR_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def image_path(tmp_path):
    """A small file standing in for an image; format checks are the API's job."""
    path = tmp_path / "receipt.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nnot-really-a-png")
    return str(path)


@pytest.fixture
def client_config():
    return {
        "installed": {
            "client_id": CLIENT_ID,
            "client_secret": CLIENT_SECRET,
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": TOKEN_URI,
            "redirect_uris": ["http://localhost"],
        }
    }


@pytest.fixture
def client_id_file(tmp_path, client_config):
    path = tmp_path / "client_id.json"
    path.write_text(json.dumps(client_config), encoding="utf-8")
    return str(path)


@pytest.fixture
def malformed_service_account_file(tmp_path):
    path = tmp_path / "service_account.json"
    path.write_text("{ this is not json", encoding="utf-8")
    return str(path)


def make_user_credentials(token="ya29.cached-token", refresh_token="1//cached-refresh"):
    credentials = Credentials(
        token=token,
        refresh_token=refresh_token,
        token_uri=TOKEN_URI,
        client_id=CLIENT_ID,
        client_secret=CLIENT_SECRET,
        scopes=["https://www.googleapis.com/auth/cloud-platform"],
    )
    credentials.expiry = datetime(2030, 1, 1, 12, 0, 0)
    return credentials


@pytest.fixture
def user_credentials():
    return make_user_credentials()


@pytest.fixture
def populated_cache(tmp_path, user_credentials):
    """Token cache that already holds a valid token."""
    cache = TokenCache(tmp_path / "credentials" / "cache.json")
    cache.ensure_directory()
    cache.save(user_credentials)
    return cache


class FakeVisionClient:
    """Stands in for vision.ImageAnnotatorClient; returns canned annotations."""

    def __init__(self, descriptions=None, error_message="", raises=None, **kwargs):
        self.descriptions = descriptions if descriptions is not None else []
        self.error_message = error_message
        self.raises = raises
        self.init_kwargs = kwargs
        self.calls = []

    def text_detection(self, image, **kwargs):
        self.calls.append({"image": image, "kwargs": kwargs})
        if self.raises is not None:
            raise self.raises
        annotations = [
            vision.EntityAnnotation(description=description)
            for description in self.descriptions
        ]
        if self.error_message:
            return vision.AnnotateImageResponse(
                text_annotations=annotations,
                error={"message": self.error_message},
            )
        return vision.AnnotateImageResponse(text_annotations=annotations)


class FakeFlow:
    """Stands in for google_auth_oauthlib.flow.Flow without talking to Google."""

    instances = []

    def __init__(self, client_config, scopes=None, redirect_uri=None, fail_with=None):
        self.client_config = client_config
        self.scopes = scopes
        self.redirect_uri = redirect_uri
        self.fail_with = fail_with
        self.authorization_kwargs = None
        self.codes = []
        self.credentials = None
        FakeFlow.instances.append(self)

    def authorization_url(self, **kwargs):
        self.authorization_kwargs = kwargs
        return f"https://accounts.example.com/auth?client_id={CLIENT_ID}", "state-token"

    def fetch_token(self, code=None, **kwargs):
        self.codes.append(code)
        if self.fail_with is not None:
            raise self.fail_with
        self.credentials = make_user_credentials(
            token="ya29.fresh-token", refresh_token="1//fresh-refresh"
        )
        return {"access_token": self.credentials.token}


@pytest.fixture
def fake_flow_factory():
    FakeFlow.instances = []

    def factory(client_config, scopes=None, redirect_uri=None):
        return FakeFlow(client_config, scopes=scopes, redirect_uri=redirect_uri)

    factory.instances = FakeFlow.instances
    return factory


class ScriptedPrompt:
    """Authorization prompt that returns a fixed code and records the URLs shown."""

    def __init__(self, code="4/test-code"):
        self.code = code
        self.urls = []

    def __call__(self, authorization_url):
        self.urls.append(authorization_url)
        return self.code


def refusing_prompt(authorization_url):
    raise AssertionError(f"prompt should not be shown (url: {authorization_url})")


@pytest.fixture
def scripted_prompt():
    return ScriptedPrompt()
