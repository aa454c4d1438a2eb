# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only
