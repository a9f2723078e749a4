# -*- coding: ascii -*-
"""Test package for optisomer."""

import unittest
import warnings


class CleanLogsTestCase(unittest.TestCase):
    """Base test case that suppresses RDKit logging noise."""

    @classmethod
    def setUpClass(cls):
        """Set up class-level test fixtures - suppress RDKit logging noise."""
        super().setUpClass()

        warnings.filterwarnings("ignore", category=DeprecationWarning, module="rdkit")

        try:
            from rdkit import RDLogger
            RDLogger.DisableLog('rdApp.warning')
            RDLogger.DisableLog('rdApp.info')
            RDLogger.DisableLog('rdApp.debug')
            # Keep error and critical levels enabled
        except ImportError:
            # RDKit not available, skip logging setup
            pass
