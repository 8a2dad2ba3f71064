#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the eccproto package."

name = "eccproto"
__version__ = "2024.10.1"
__author__ = "The eccproto developers"
__author_email__ = "devs@eccproto.org"
__copyright__ = "Copyright (C) 2024 The eccproto developers"
__license__ = "MIT License"
