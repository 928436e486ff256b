# SPDX-License-Identifier: MIT
"""Mermaid diagram generator for the source set graph.

Generates Mermaid flowchart syntax showing targets, their compilations
and the dependsOn edges between source sets. Output can be rendered in
GitHub markdown or the Mermaid live editor (https://mermaid.live).

Example output:
    ```mermaid
    flowchart BT
      commonMain([commonMain])
      jvmMain([jvmMain])
      jvm_main[jvm/main]
      jvmMain --> commonMain
      jvm_main -.-> jvmMain
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from kmpp.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from kmpp.plugin.extension import MultiplatformExtension


class MermaidGenerator(BaseGenerator):
    """Generator that produces a Mermaid flowchart of the source set graph.

    Source sets are drawn as rounded nodes with solid dependsOn edges.
    With ``show_compilations``, each compilation is drawn as a box with a
    dotted edge to every source set it includes directly.

    Usage:
        generator = MermaidGenerator()
        generator.generate(kotlin, Path("build/reports"))
        # Creates build/reports/source-sets.mmd
    """

    def __init__(
        self,
        *,
        show_compilations: bool = True,
        direction: str = "BT",
        output_filename: str = "source-sets.mmd",
    ) -> None:
        """Initialize the Mermaid generator.

        Args:
            show_compilations: If True, also draw compilations.
            direction: Graph direction - "BT" (bottom-top, common code on
                top), "TB", "LR" or "RL".
            output_filename: Name of the output file.
        """
        super().__init__("mermaid")
        self._show_compilations = show_compilations
        self._direction = direction
        self._output_filename = output_filename

    def generate(self, extension: MultiplatformExtension, output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / self._output_filename

        with open(output_file, "w") as f:
            self._write_header(f, extension)
            self._write_source_sets(f, extension)
            if self._show_compilations:
                self._write_compilations(f, extension)
        return output_file

    def _write_header(self, f: TextIO, extension: MultiplatformExtension) -> None:
        f.write("---\n")
        f.write(f"title: {extension.project.name} Source Sets\n")
        f.write("---\n")
        f.write(f"flowchart {self._direction}\n")

    def _write_source_sets(self, f: TextIO, extension: MultiplatformExtension) -> None:
        for source_set in extension.source_sets:
            node_id = self._sanitize_id(source_set.name)
            f.write(f"  {node_id}([{source_set.name}])\n")

        f.write("\n")
        for src, dst in extension.source_sets.edges():
            f.write(f"  {self._sanitize_id(src)} --> {self._sanitize_id(dst)}\n")

    def _write_compilations(self, f: TextIO, extension: MultiplatformExtension) -> None:
        lines: list[str] = []
        edges: list[str] = []
        for target in extension.targets:
            for compilation in target.compilations:
                node_id = self._sanitize_id(f"{target.name}_{compilation.name}")
                lines.append(f"  {node_id}[{target.name}/{compilation.name}]\n")
                for source_set in compilation.kotlin_source_sets:
                    edges.append(f"  {node_id} -.-> {self._sanitize_id(source_set.name)}\n")
        if not lines:
            return
        f.write("\n")
        f.writelines(lines)
        f.writelines(edges)

    def _sanitize_id(self, name: str) -> str:
        """Sanitize a name for use as a Mermaid node ID."""
        result = name.replace("/", "_").replace("\\", "_")
        result = result.replace(".", "_").replace("-", "_")
        result = result.replace(" ", "_").replace(":", "_")
        if result and result[0].isdigit():
            result = "n" + result
        return result
