# -*- coding: utf-8 -*-
"""Saved user profile."""
