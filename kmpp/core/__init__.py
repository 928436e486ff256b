# SPDX-License-Identifier: MIT
"""Host build model: projects, live collections, attributes and tasks."""
