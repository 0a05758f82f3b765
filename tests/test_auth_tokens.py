from __future__ import annotations

import base64
import json

from petstore.auth import READ_PETS, WRITE_PETS, bearer_token, issue_token, verify_token


def test_issue_and_verify_carries_scopes():
    token = issue_token(subject="alice", scopes=[WRITE_PETS, READ_PETS, READ_PETS], secret="s")
    claims = verify_token(token=token, secret="s")
    assert claims is not None
    assert claims.subject == "alice"
    assert claims.scopes == {READ_PETS, WRITE_PETS}
    assert claims.has_scope(READ_PETS)


def test_scope_claim_is_space_delimited():
    token = issue_token(subject="alice", scopes=[WRITE_PETS, READ_PETS], secret="s")
    payload_b64 = token.split(".", 1)[0]
    payload = json.loads(base64.urlsafe_b64decode(payload_b64 + "=" * (-len(payload_b64) % 4)))
    assert payload["scope"] == "read:pets write:pets"


def test_expired_token_is_rejected():
    token = issue_token(subject="alice", scopes=[READ_PETS], secret="s", ttl_seconds=-10)
    assert verify_token(token=token, secret="s") is None


def test_wrong_secret_and_garbage_are_rejected():
    token = issue_token(subject="alice", scopes=[READ_PETS], secret="s")
    assert verify_token(token=token, secret="other") is None
    assert verify_token(token="not-a-token", secret="s") is None
    assert verify_token(token="###.###", secret="s") is None
    assert verify_token(token="", secret="s") is None


def test_empty_subject_is_rejected():
    token = issue_token(subject="  ", scopes=[READ_PETS], secret="s")
    assert verify_token(token=token, secret="s") is None


def test_bearer_token_parsing():
    assert bearer_token("Bearer abc") == "abc"
    assert bearer_token("bearer   abc ") == "abc"
    assert bearer_token("Basic abc") is None
    assert bearer_token("Bearer ") is None
    assert bearer_token(None) is None
