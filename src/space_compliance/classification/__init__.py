# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Risk and jurisdiction classification."""

from space_compliance.classification.classifier import RiskClassifier
from space_compliance.classification.rules import JurisdictionRule, RiskRule, RuleTable

__all__ = ["JurisdictionRule", "RiskClassifier", "RiskRule", "RuleTable"]
