#!/usr/bin/env python3

# Copyright (C) 2024 The eccproto developers
#
# This file is part of eccproto. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of eccproto including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by eccproto from those raised by other codebase.

EccTypeError is raised for missing (None) required arguments,
EccValueError for arguments out of their domain,
EccRuntimeError for operations not allowed in the current state
(e.g. signing before key generation) or for failed computations.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the eccproto versions are derived.

Signature verification never raises for invalid signatures:
it returns False.
"""


class EccValueError(ValueError):
    pass


class EccTypeError(TypeError):
    pass


class EccRuntimeError(RuntimeError):
    pass
