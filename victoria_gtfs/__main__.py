# © Copyright 2026 The victoria-gtfs authors
# SPDX-License-Identifier: GPL-3.0-or-later

from .app import main

if __name__ == "__main__":
    main()
