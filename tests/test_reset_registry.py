"""
Unit tests for reset code issuing, validation, expiry and the backing store.
"""
from recovery.registry import ResetCodeRegistry, generate_code
from recovery.store import InMemoryResetStore, ResetEntry

from fakes import FakeClock, codes


def test_generated_codes_are_six_digits_in_range():
    for _ in range(200):
        code = generate_code()
        assert len(code) == 6
        assert code.isdigit()
        assert 100000 <= int(code) <= 999999


def test_issue_then_validate_then_consume():
    registry = ResetCodeRegistry()
    code = registry.issue("a@b.com")
    assert registry.validate("a@b.com", code)
    # validate alone does not consume
    assert registry.validate("a@b.com", code)
    registry.consume("a@b.com")
    assert not registry.validate("a@b.com", code)
    assert not registry.is_pending("a@b.com")


def test_wrong_code_and_unknown_email_fail():
    registry = ResetCodeRegistry(code_factory=codes("482913"))
    registry.issue("a@b.com")
    assert not registry.validate("a@b.com", "482914")
    assert not registry.validate("other@b.com", "482913")
    assert not registry.validate("a@b.com", "４８２９１３")


def test_second_issue_invalidates_first():
    registry = ResetCodeRegistry(code_factory=codes("111111", "222222"))
    first = registry.issue("a@b.com")
    second = registry.issue("a@b.com")
    assert not registry.validate("a@b.com", first)
    assert registry.validate("a@b.com", second)
    assert len(registry.store) == 1


def test_codes_expire_after_ttl():
    clock = FakeClock()
    registry = ResetCodeRegistry(ttl_seconds=600, clock=clock)
    code = registry.issue("a@b.com")
    clock.advance(599)
    assert registry.validate("a@b.com", code)
    clock.advance(1)
    assert not registry.validate("a@b.com", code)
    # the expired entry is cleaned up lazily
    assert registry.store.get("a@b.com") is None


def test_reissue_after_expiry_gets_fresh_window():
    clock = FakeClock()
    registry = ResetCodeRegistry(ttl_seconds=600, clock=clock, code_factory=codes("111111", "222222"))
    registry.issue("a@b.com")
    clock.advance(601)
    code = registry.issue("a@b.com")
    clock.advance(300)
    assert registry.validate("a@b.com", code)


def test_emails_are_case_insensitive():
    registry = ResetCodeRegistry(code_factory=codes("123456"))
    registry.issue("  Alice@Example.COM ")
    assert registry.validate("alice@example.com", "123456")


def test_store_conditional_delete_keeps_newer_code():
    store = InMemoryResetStore()
    store.set(ResetEntry(email="a@b.com", code="222222", issued_at=1.0))
    # a stale delete for an older code must not remove the newer entry
    assert store.delete("a@b.com", code="111111") is False
    assert store.get("a@b.com").code == "222222"
    assert store.delete("a@b.com", code="222222") is True
    assert store.delete("a@b.com") is False


def test_issue_prunes_expired_codes_for_other_addresses():
    clock = FakeClock()
    registry = ResetCodeRegistry(ttl_seconds=600, clock=clock)
    registry.issue("a@b.com")
    registry.issue("c@d.com")
    clock.advance(300)
    live = registry.issue("e@f.com")
    clock.advance(300)
    # a@b.com and c@d.com are now expired and never validated again
    registry.issue("g@h.com")
    assert len(registry.store) == 2
    assert registry.store.get("a@b.com") is None
    assert registry.validate("e@f.com", live)


def test_store_prune_keeps_recent_entries():
    store = InMemoryResetStore()
    store.set(ResetEntry(email="old@b.com", code="111111", issued_at=10.0))
    store.set(ResetEntry(email="new@b.com", code="222222", issued_at=20.0))
    assert store.prune(10.0) == 1
    assert store.get("old@b.com") is None
    assert store.get("new@b.com").code == "222222"
