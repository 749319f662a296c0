# -*- coding: utf-8 -*-
"""Wellness plan generation and plan history."""
