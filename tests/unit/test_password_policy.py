"""Unit tests for the password length probe helpers."""

import pytest

from content_seeder.probes.password_length import PasswordAttempt, PasswordPolicyReport, make_password


class TestMakePassword:

    @pytest.mark.parametrize("length", [1, 2, 3, 4, 6, 12, 30])
    def test_exact_length(self, length):
        assert len(make_password(length)) == length

    def test_character_classes(self):
        password = make_password(6)
        assert any(c.isupper() for c in password)
        assert any(c.islower() for c in password)
        assert any(c.isdigit() for c in password)
        assert any(not c.isalnum() for c in password)

    def test_short_lengths_keep_the_pattern_prefix(self):
        assert make_password(1) == "T"
        assert make_password(3) == "Te1"

    def test_zero_length_rejected(self):
        with pytest.raises(ValueError):
            make_password(0)


class TestPasswordPolicyReport:

    def _report(self, below_accepted: bool, at_accepted: bool, password_error=None) -> PasswordPolicyReport:
        return PasswordPolicyReport(
            client_min=6,
            expected_min=12,
            below_min=PasswordAttempt(length=6, accepted=below_accepted, password_error=password_error),
            at_min=PasswordAttempt(length=12, accepted=at_accepted),
        )

    def test_server_enforces_expected_minimum(self):
        report = self._report(False, True, password_error="Password must be at least 12 characters")
        assert report.server_matches_expected is True
        assert report.policy_mismatch is True

    def test_rejection_must_name_password_field(self):
        report = self._report(False, True, password_error=None)
        assert report.server_matches_expected is False

    def test_server_accepts_short_password(self):
        report = self._report(True, True)
        assert report.server_matches_expected is False
        assert report.policy_mismatch is False
