# SPDX-License-Identifier: MIT
"""Naming helpers shared by targets, compilations and tasks."""

from __future__ import annotations


def lower_camel_case_name(*parts: str | None) -> str:
    """Join name parts in lowerCamelCase, skipping empty parts.

    The first part is kept as given; later parts get their first letter
    uppercased, so distinct first parts always give distinct names.

    Example:
        >>> lower_camel_case_name("jvm", "test", "compileClasspath")
        'jvmTestCompileClasspath'
        >>> lower_camel_case_name(None, "sourcesJar")
        'sourcesJar'
    """
    words = [p for p in parts if p]
    if not words:
        return ""
    head, *tail = words
    return head + "".join(w[0].upper() + w[1:] for w in tail)


def capitalize(name: str) -> str:
    """Uppercase the first character only ("jvmMain" -> "JvmMain")."""
    return name[:1].upper() + name[1:]
