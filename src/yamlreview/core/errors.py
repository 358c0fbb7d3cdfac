# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for yamlreview."""

from __future__ import annotations


class YamlReviewError(Exception):
    """Base class for errors raised by yamlreview."""


class ConfigError(YamlReviewError):
    """Raised when configuration input is invalid."""


class LinterNotFoundError(YamlReviewError):
    """Raised when the yamllint executable is not available on ``PATH``."""


__all__ = ["ConfigError", "LinterNotFoundError", "YamlReviewError"]
