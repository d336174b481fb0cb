# SPDX-License-Identifier: MIT


class InvalidConfig(ValueError):
    """Raised when the heatmap engine is given an unusable configuration."""

    pass
