import pytest
from pydantic import ValidationError

from base_models import APIRepository, APIUser, Credential
from fakes import repo_json, user_json


@pytest.mark.parametrize("remote_type,expected", [
    ("User", "user"),
    ("Organization", "org"),
    ("Bot", "user"),
])
def test_user_type_is_normalized(remote_type, expected):
    assert APIUser.model_validate(user_json(type_=remote_type)).type == expected


def test_user_email_is_optional():
    payload = user_json()
    del payload["email"]
    assert APIUser.model_validate(payload).email is None


def test_repository_missing_field_is_rejected():
    payload = repo_json("r")
    del payload["clone_url"]
    with pytest.raises(ValidationError):
        APIRepository.model_validate(payload)


def test_entities_are_read_only():
    repo = APIRepository.model_validate(repo_json("r"))
    with pytest.raises(ValidationError):
        repo.name = "other"


def test_credential_requires_token_and_endpoint():
    with pytest.raises(ValidationError):
        Credential(token="", endpoint="https://api.github.com")
    with pytest.raises(ValidationError):
        Credential(token="t", endpoint="")
