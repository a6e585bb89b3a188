# Copyright (c) 2025 Keshav
# Licensed under the GNU Affero General Public License v3.0
# See LICENSE file for details.
"""Exception types raised at the engine boundary."""

from __future__ import annotations


class ComplianceError(Exception):
    """Base class for all errors raised by the compliance engine."""


class ProfileValidationError(ComplianceError, ValueError):
    """A profile is missing a mandatory classification or is malformed.

    Raised synchronously by the assessment entry point before any
    requirement is resolved; no partial result is ever produced.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
