# -*- coding: utf-8 -*-
"""Guided meditation scripts and meditation history."""
