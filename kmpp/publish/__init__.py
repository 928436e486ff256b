# SPDX-License-Identifier: MIT
"""Software components, Maven publications and the maven-publish plugin."""
