# -*- coding: utf-8 -*-
"""Weight / sleep / mood progress log."""
