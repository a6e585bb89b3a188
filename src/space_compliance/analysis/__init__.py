# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Structural sub-assessments that run alongside scoring.

These are domain specific, not a generic layer.  ``deorbit`` belongs to the
debris domain; every other module here (deemed export, screening, TCP,
license exceptions, documentation, penalty exposure) is export control and
reads that domain's profile and catalogs.  Domains attach them through
``RegulatoryDomain.sub_assessors``.

None of these read assessment statuses; each is a pure function of the
profile and engine settings.
"""
