# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Pure civil twilight computation.

No I/O, no wall clock. Only stdlib math plus numpy for the series helper.
"""
