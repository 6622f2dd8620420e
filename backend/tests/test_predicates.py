"""
Tests for the default format predicates.
"""

import pytest

from signup_validator.validators import is_valid_email_format, is_valid_password_format, password_rule


class TestEmailFormat:
    """Test is_valid_email_format."""

    @pytest.mark.parametrize("text", [
        "good@example.com",
        "bart@simsom.com",
        "first.last+tag@mail.example.co.uk",
    ])
    def test_accepts_well_formed_addresses(self, text):
        """Test well-formed addresses are accepted."""
        assert is_valid_email_format(text) is True

    @pytest.mark.parametrize("text", [
        "",
        "not-an-email",
        "missing-domain@",
        "@missing-local.com",
        "no-tld@example",
        "two@@example.com",
        "a@b@example.com",
        "spaces in@example.com",
        "trailing-dot@example.",
        "double-dot@example..com",
        "a..b@example.com",
        ".a@example.com",
        "a@-example-.com",
        "a(b@example.com",
        "a@exa_mple.com",
    ])
    def test_rejects_malformed_addresses(self, text):
        """Test malformed addresses are rejected."""
        assert is_valid_email_format(text) is False

    @pytest.mark.parametrize("value", [None, 42, b"good@example.com", ["good@example.com"]])
    def test_total_over_non_strings(self, value):
        """Test non-string input returns False instead of raising."""
        assert is_valid_email_format(value) is False


class TestPasswordFormat:
    """Test is_valid_password_format and password_rule."""

    def test_default_minimum_length_is_eight(self):
        """Test the default rule comes from settings (8)."""
        assert is_valid_password_format("GoodPass123") is True
        assert is_valid_password_format("12345678") is True
        assert is_valid_password_format("1234567") is False
        assert is_valid_password_format("short") is False

    def test_minimum_length_from_environment(self, monkeypatch):
        """Test PASSWORD_MIN_LENGTH is read from the environment."""
        monkeypatch.setenv("PASSWORD_MIN_LENGTH", "12")

        assert is_valid_password_format("GoodPass123") is False
        assert is_valid_password_format("GoodPass1234") is True

    def test_explicit_minimum_length(self):
        """Test an explicit min_length overrides settings."""
        assert is_valid_password_format("abc", min_length=3) is True
        assert is_valid_password_format("ab", min_length=3) is False

    def test_password_rule_builds_predicate(self):
        """Test password_rule returns a one-argument predicate."""
        rule = password_rule(4)

        assert rule("abcd") is True
        assert rule("abc") is False
        assert rule(None) is False

    def test_password_rule_rejects_non_positive_length(self):
        """Test password_rule refuses a minimum below 1."""
        with pytest.raises(ValueError):
            password_rule(0)


class TestEmailFormatKeepsRawText:
    """Test the email check does not leak normalization into constructors."""

    def test_mixed_case_domain_accepted_and_unchanged(self):
        """Test a mixed-case address passes and make_email keeps it verbatim."""
        from signup_validator.validators import make_email

        assert is_valid_email_format("Someone@Example.COM") is True
        assert make_email("Someone@Example.COM").value == "Someone@Example.COM"
