# SPDX-FileCopyrightText: 2025 polysecret contributors
# SPDX-License-Identifier: MIT

from .cli import main

main(prog_name="polysecret")
