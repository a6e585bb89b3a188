# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Status weights and risk multipliers for compliance scoring."""

from space_compliance.data.models import ComplianceStatus, RiskLevel

# ---------------------------------------------------------------------------
# Compliance weight per status (N/A is excluded, not weighted)
# ---------------------------------------------------------------------------
STATUS_WEIGHTS: dict[ComplianceStatus, float] = {
    ComplianceStatus.COMPLIANT: 1.0,
    ComplianceStatus.PARTIAL: 0.5,
    ComplianceStatus.NON_COMPLIANT: 0.0,
    ComplianceStatus.NOT_ASSESSED: 0.0,
}

# Weights scaled to integers so group scores are exact.
WEIGHT_SCALE = 2
STATUS_UNITS: dict[ComplianceStatus, int] = {
    status: int(round(weight * WEIGHT_SCALE)) for status, weight in STATUS_WEIGHTS.items()
}

# ---------------------------------------------------------------------------
# Risk multipliers
# ---------------------------------------------------------------------------
RISK_MULTIPLIERS: dict[RiskLevel, int] = {
    RiskLevel.CRITICAL: 4,
    RiskLevel.HIGH: 3,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 1,
}
