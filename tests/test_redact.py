from __future__ import annotations

from cidfeed._redact import redact_for_log


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "identityJson": '{"did":"did:key:z6Mk","secret":"x"}',
        "delegationJson": "ucan",
        "auditLogJson": "[]",
        "nested": {"identity_json": "abc"},
    }

    redacted = redact_for_log(payload)
    assert redacted["identityJson"].startswith("<redacted:")
    assert redacted["delegationJson"] == "<redacted:4ch>"
    assert redacted["auditLogJson"] == "[]"
    assert redacted["nested"]["identity_json"] == "<redacted:3ch>"


def test_redact_for_log_keeps_absent_values() -> None:
    assert redact_for_log({"identityJson": None}) == {"identityJson": None}


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"auditLogJson": long_value}, max_string=10)
    assert redacted["auditLogJson"].startswith("x" * 10)
    assert "<truncated>" in redacted["auditLogJson"]


def test_redact_for_log_passes_id_lists_through() -> None:
    payload = {"revocationIds": ["a", "fail-b"]}
    assert redact_for_log(payload) == {"revocationIds": ["a", "fail-b"]}
