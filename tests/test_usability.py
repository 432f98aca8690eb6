"""
Tests for key usability evaluation.
"""

import pytest
from datetime import datetime, timedelta, timezone

from keytrust import Key, Capabilities, Identity, is_usable, short_id


NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
FINGERPRINT = "0123456789ABCDEF01234567ABCD1234ABCD1234"


def make_key(**overrides):
    """Build an encryption-capable, fully valid key."""
    attrs = {
        'key_type': "pub",
        'key_length': 4096,
        'validity': "f",
        'creation_date': datetime(2020, 1, 1, tzinfo=timezone.utc),
        'fingerprint': FINGERPRINT,
        'capabilities': Capabilities(encrypt=True, sign=True, certify=True),
    }
    attrs.update(overrides)
    return Key(**attrs)


class TestCapabilityVetoes:
    """Test that capability flags veto usability."""
    
    def test_deactivated_key_unusable(self):
        """Test that deactivated keys are never usable."""
        key = make_key(capabilities=Capabilities(encrypt=True, deactivated=True))
        
        assert not is_usable(key, now=NOW)
        assert not is_usable(key, always_trust=True, now=NOW)
    
    def test_deactivated_key_with_ultimate_validity_unusable(self):
        """Test that deactivation wins over ultimate validity."""
        key = make_key(
            validity="u",
            capabilities=Capabilities(
                encrypt=True, sign=True, certify=True, authentication=True, deactivated=True,
            ),
        )
        
        assert not is_usable(key, now=NOW)
    
    def test_missing_encrypt_unusable(self):
        """Test that keys without encryption capability are unusable."""
        key = make_key(capabilities=Capabilities(sign=True, certify=True, authentication=True))
        
        assert not is_usable(key, now=NOW)
        assert not is_usable(key, always_trust=True, now=NOW)
    
    def test_encrypt_only_key_usable(self):
        """Test that the encrypt flag alone is enough."""
        key = make_key(capabilities=Capabilities(encrypt=True))
        
        assert is_usable(key, now=NOW)


class TestExpiration:
    """Test expiration handling."""
    
    def test_expired_key_unusable(self):
        """Test that keys expired in the past are unusable."""
        key = make_key(expiration_date=NOW - timedelta(days=1))
        
        assert not is_usable(key, now=NOW)
    
    def test_expired_key_unusable_with_always_trust(self):
        """Test that always trust does not override expiration."""
        key = make_key(expiration_date=NOW - timedelta(seconds=1))
        
        assert not is_usable(key, always_trust=True, now=NOW)
    
    def test_future_expiration_usable(self):
        """Test that keys expiring in the future are usable."""
        key = make_key(expiration_date=NOW + timedelta(days=30))
        
        assert is_usable(key, now=NOW)
    
    def test_expiration_at_now_usable(self):
        """Test that expiration must be strictly before now."""
        key = make_key(expiration_date=NOW)
        
        assert is_usable(key, now=NOW)
    
    def test_unset_expiration_never_expires(self):
        """Test that keys without expiration never expire."""
        key = make_key(expiration_date=None)
        
        assert is_usable(key, now=datetime(9999, 1, 1, tzinfo=timezone.utc))
    
    def test_naive_datetimes_treated_as_utc(self):
        """Test that naive datetimes compare as UTC."""
        key = make_key(expiration_date=datetime(2024, 6, 1, 11, 0, 0))
        
        assert not is_usable(key, now=NOW)
        assert is_usable(key, now=datetime(2024, 6, 1, 10, 0, 0))
    
    def test_aware_dates_near_limits_do_not_fail(self):
        """Test that far-future dates in other timezones still evaluate."""
        far_future = datetime.max.replace(tzinfo=timezone(timedelta(hours=-5)))
        key = make_key(expiration_date=far_future)
        
        assert is_usable(key, now=datetime(2024, 1, 1, tzinfo=timezone.utc))
    
    def test_aware_dates_compared_across_timezones(self):
        """Test that expiration compares by instant, not wall time."""
        # 13:00 at UTC+2 is 11:00 UTC, before NOW (12:00 UTC)
        key = make_key(expiration_date=datetime(2024, 6, 1, 13, 0, 0, tzinfo=timezone(timedelta(hours=2))))
        
        assert not is_usable(key, now=NOW)
    
    def test_default_clock_is_wall_clock(self):
        """Test that omitting now uses the current time."""
        past = make_key(expiration_date=datetime(2000, 1, 1, tzinfo=timezone.utc))
        future = make_key(expiration_date=datetime.now(timezone.utc) + timedelta(days=365))
        
        assert not is_usable(past)
        assert is_usable(future)


class TestValidity:
    """Test validity code checks."""
    
    @pytest.mark.parametrize("validity", ["m", "f", "u"])
    def test_trusted_validities_usable(self, validity):
        """Test that marginal, full and ultimate validity are enough."""
        key = make_key(validity=validity)
        
        assert is_usable(key, always_trust=False, now=NOW)
    
    @pytest.mark.parametrize("validity", ["", "n", "r", "e", "q", "-", "o", "i", "d", "F", "mf"])
    def test_other_validities_unusable(self, validity):
        """Test that every other validity code is rejected."""
        key = make_key(validity=validity)
        
        assert not is_usable(key, always_trust=False, now=NOW)
    
    @pytest.mark.parametrize("validity", ["", "n", "r", "-"])
    def test_always_trust_bypasses_validity(self, validity):
        """Test that always trust ignores the validity code."""
        key = make_key(validity=validity)
        
        assert is_usable(key, always_trust=True, now=NOW)
    
    def test_owner_trust_not_evaluated(self):
        """Test that owner trust does not affect usability."""
        trusted = make_key(owner_trust="u")
        untrusted = make_key(owner_trust="n")
        
        assert is_usable(trusted, now=NOW) == is_usable(untrusted, now=NOW)


class TestKeyMethods:
    """Test the evaluation shortcuts on Key."""
    
    def test_end_to_end_example(self):
        """Test a fully valid key with no expiration."""
        key = make_key(validity="f", expiration_date=None)
        
        assert key.is_usable(False)
        assert key.is_usable(always_trust=False, now=NOW)
        assert short_id(key) == "0xABCD1234ABCD1234"
        assert key.short_id() == "0xABCD1234ABCD1234"
    
    def test_evaluation_does_not_mutate_key(self):
        """Test that evaluation leaves the key unchanged."""
        key = make_key(expiration_date=NOW - timedelta(days=1))
        before = key.to_dict()
        
        key.is_usable(now=NOW)
        key.is_usable(always_trust=True, now=NOW)
        
        assert key.to_dict() == before
    
    def test_key_is_hashable(self):
        """Test that keys can be used in sets and as dict keys."""
        key = make_key(identities={"Alice": Identity(name="Alice")})
        same = make_key(identities={"Alice": Identity(name="Alice")})
        
        assert hash(key) == hash(same)
        assert len({key, same}) == 1
