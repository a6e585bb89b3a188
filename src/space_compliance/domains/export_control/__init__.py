# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""US export control (ITAR / EAR) for space-sector organizations."""
