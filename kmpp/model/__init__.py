# SPDX-License-Identifier: MIT
"""Multiplatform project model: targets, compilations and source sets."""
