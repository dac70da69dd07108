# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters around the twilight domain.

Wall clock, timezone database and HTTP access are confined to this layer.
"""
