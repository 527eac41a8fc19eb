"""
Unit tests for the exemption lookup used by the per-meet checks.
"""

import unittest

from meetcheck.config import Config, ConfigValidator, Exemption, ExemptionConfig
from meetcheck.report import Report


class TestExemptionsFor(unittest.TestCase):
    """Test Config.exemptions_for."""

    def setUp(self):
        root = {
            'divisions': {},
            'weightclasses': {},
            'exemptions': {
                '1901': ['ExemptLiftOrder'],
                '1902': [],
                'ipf/2019-worlds': ['ExemptDivision', 'ExemptWeightClassConsistency'],
            },
        }
        self.report = Report('CONFIG.toml')
        self.config = ConfigValidator().validate(root, self.report)

    def test_known_folder(self):
        self.assertEqual(self.config.exemptions_for('1901'), (Exemption.EXEMPT_LIFT_ORDER,))

    def test_unknown_folder(self):
        self.assertIsNone(self.config.exemptions_for('9999'))

    def test_empty_entry_is_not_absent(self):
        self.assertEqual(self.config.exemptions_for('1902'), ())

    def test_multiple_exemptions_in_file_order(self):
        self.assertEqual(
            self.config.exemptions_for('ipf/2019-worlds'),
            (Exemption.EXEMPT_DIVISION, Exemption.EXEMPT_WEIGHTCLASS_CONSISTENCY)
        )

    def test_lookup_is_exact(self):
        self.assertIsNone(self.config.exemptions_for('190'))
        self.assertIsNone(self.config.exemptions_for(' 1901'))

    def test_result_is_read_only(self):
        exemptions = self.config.exemptions_for('1901')
        self.assertIsInstance(exemptions, tuple)
        self.assertEqual(
            self.config.exemptions[0].exemptions, [Exemption.EXEMPT_LIFT_ORDER]
        )

    def test_empty_config(self):
        self.assertIsNone(Config().exemptions_for('1901'))

    def test_first_match_wins(self):
        config = Config(exemptions=[
            ExemptionConfig('1901', [Exemption.EXEMPT_DIVISION]),
            ExemptionConfig('1901', [Exemption.EXEMPT_LIFT_ORDER]),
        ])
        self.assertEqual(config.exemptions_for('1901'), (Exemption.EXEMPT_DIVISION,))
