# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class BaseMixin:
    """Terminal mixin of every mixin chain.

    Mixins always forward **kwargs to super().__init__. This class swallows
    whatever is left so object.__init__ is called without arguments.
    """

    def __init__(self, **kwargs):
        super().__init__()
