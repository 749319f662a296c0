# -*- coding: utf-8 -*-
"""Carely: wellness plan and guided meditation backend."""
