"""Unit tests for the email well-formedness check."""

import unittest
import sys
from pathlib import Path

import idna

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from domain.model.email import (
    MAX_DOMAIN_LENGTH,
    MAX_LOCAL_LENGTH,
    MAX_TLD_LENGTH,
    is_email,
    to_ascii,
)


class TestIsEmailStructure(unittest.TestCase):
    """Splitting on '@' and '.'."""

    def test_valid_addresses(self):
        for email in ['user@example.com', 'a.b+c@example.io', 'User@Example.COM',
                      "o'brien!#$%&*/=?^_`{|}~-@mail.org"]:
            with self.subTest(email=email):
                self.assertTrue(is_email(email))

    def test_empty_string_is_invalid(self):
        self.assertFalse(is_email(''))

    def test_requires_exactly_one_at(self):
        for email in ['userexample.com', 'a@b@c.com', '@@example.com']:
            with self.subTest(email=email):
                self.assertFalse(is_email(email))

    def test_requires_exactly_one_dot_in_host(self):
        for email in ['a@bcom', 'a@sub.example.io', 'a.b+c@sub.example.io', 'a@b..com']:
            with self.subTest(email=email):
                self.assertFalse(is_email(email))

    def test_empty_parts_are_invalid(self):
        for email in ['@example.com', 'user@.com', 'user@example.']:
            with self.subTest(email=email):
                self.assertFalse(is_email(email))


class TestIsEmailLengthLimits(unittest.TestCase):
    """Boundaries for local part, domain and TLD."""

    def test_local_part_boundary(self):
        self.assertTrue(is_email('a' * MAX_LOCAL_LENGTH + '@b.com'))
        self.assertFalse(is_email('a' * (MAX_LOCAL_LENGTH + 1) + '@b.com'))

    def test_domain_boundary(self):
        self.assertTrue(is_email('user@' + 'd' * MAX_DOMAIN_LENGTH + '.com'))
        self.assertFalse(is_email('user@' + 'd' * (MAX_DOMAIN_LENGTH + 1) + '.com'))

    def test_tld_boundary(self):
        self.assertTrue(is_email('user@example.' + 't' * MAX_TLD_LENGTH))
        self.assertFalse(is_email('user@example.' + 't' * (MAX_TLD_LENGTH + 1)))


class TestIsEmailLocalPart(unittest.TestCase):
    """Dot placement and character set of the local part."""

    def test_rejects_leading_trailing_and_consecutive_dots(self):
        for email in ['.a@b.com', 'a.@b.com', 'a..b@c.com', '.@b.com']:
            with self.subTest(email=email):
                self.assertFalse(is_email(email))

    def test_rejects_characters_outside_charset(self):
        for email in ['us er@example.com', 'user(x)@example.com', 'a,b@example.com',
                      '"quoted"@example.com', 'user\t@example.com']:
            with self.subTest(email=email):
                self.assertFalse(is_email(email))

    def test_rejects_whitespace_in_host(self):
        self.assertFalse(is_email('user@exa mple.com'))
        self.assertFalse(is_email('user@example.com\n'))


class TestIsEmailInternationalized(unittest.TestCase):
    """Non-ASCII input goes through IDNA encoding."""

    def test_unicode_host_is_valid(self):
        self.assertTrue(is_email('user@bücher.de'))

    def test_unicode_local_part_is_valid(self):
        self.assertTrue(is_email('josé@example.com'))

    def test_uppercase_unicode_is_case_mapped(self):
        self.assertTrue(is_email('user@BÜCHER.de'))
        self.assertTrue(is_email('Müller@example.com'))

    def test_unicode_local_part_keeps_symbols(self):
        self.assertTrue(is_email('ü+tag@example.com'))
        self.assertTrue(is_email("josé.o'brien@bücher.de"))

    def test_idna_failure_is_invalid(self):
        self.assertFalse(is_email('user@☃.com'))
        self.assertFalse(is_email('user@\u0301abc.com'))

    def test_result_is_stable_across_calls(self):
        for email in ['user@bücher.de', 'a..b@c.com', 'user@example.com']:
            with self.subTest(email=email):
                self.assertEqual(is_email(email), is_email(email))


class TestToAscii(unittest.TestCase):
    """Tests for to_ascii label conversion."""

    def test_ascii_is_unchanged(self):
        self.assertEqual(to_ascii('Example.com'), 'Example.com')
        self.assertEqual(to_ascii('a..b'), 'a..b')

    def test_unicode_label_becomes_a_label(self):
        self.assertEqual(to_ascii('bücher.de'), 'xn--bcher-kva.de')

    def test_uppercase_label_is_mapped(self):
        self.assertEqual(to_ascii('BÜCHER.de'), 'xn--bcher-kva.de')

    def test_lenient_mode_punycodes_local_part(self):
        self.assertEqual(to_ascii('Müller', strict=False), 'xn--mller-kva')
        self.assertTrue(to_ascii('ü+tag', strict=False).startswith('xn--+tag-'))

    def test_strict_mode_rejects_symbols_in_unicode_label(self):
        with self.assertRaises(idna.IDNAError):
            to_ascii('ü+tag')

    def test_invalid_label_raises(self):
        with self.assertRaises(idna.IDNAError):
            to_ascii('☃.com')


if __name__ == '__main__':
    unittest.main()
