#!/usr/bin/env python3

# Copyright (C) The tronlib developers
#
# This file is part of tronlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of tronlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the tronlib package."

name = "tronlib"
__version__ = "2024.1.0"
__author__ = "The tronlib developers"
__author_email__ = "devs@tronlib.org"
__copyright__ = "Copyright (C) 2024 The tronlib developers"
__license__ = "MIT License"
