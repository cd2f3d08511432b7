"""
Recursive include resolver.

One Resolver walks one document. Include directives are replaced by a
heading built from the link alias, an empty line and the expanded content
of the linked document; every other line is copied as is. Nested documents
get their own Resolver sharing the same Accumulator, so the output is a
pre-order walk of the include tree.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .accumulator import Accumulator
from .directive import is_directive, parse_directive
from .errors import DirectiveParseError, IncludeCycleError
from .frontmatter import content_without_frontmatter
from .store.protocols import DocumentStore
from .types import CyclePolicy, Document, Directive

logger = logging.getLogger(__name__)


class Resolver:

    def __init__(
        self,
        document: Document,
        store: DocumentStore,
        accumulator: Accumulator,
        file_extension: str,
        *,
        chain: Tuple[str, ...] = (),
        cycle_policy: CyclePolicy = "skip",
    ):
        """
        Args:
            document: Document to walk
            store: Source of text, front matter and link targets
            accumulator: Shared output
            file_extension: Suffix appended to link paths (".md")
            chain: Paths of the documents currently being expanded above this one
            cycle_policy: "skip" drops a cyclic include with a warning, "error" raises
        """
        self.document = document
        self.store = store
        self.accumulator = accumulator
        self.file_extension = file_extension
        self.chain = chain + (document.path,)
        self.cycle_policy = cycle_policy

    def run(self) -> None:
        for line in content_without_frontmatter(self.document, self.store):
            if is_directive(line):
                self._expand_directive(line)
            else:
                self.accumulator.add_line(line)

    def _expand_directive(self, line: str) -> None:
        try:
            directive = parse_directive(line)
        except DirectiveParseError as e:
            logger.error("%s: %s", self.document.path, e)
            return

        self.accumulator.add_line(directive.heading)
        self.accumulator.add_line("")
        self._include(directive)

    def _include(self, directive: Directive) -> None:
        path = directive.ref + self.file_extension
        logger.debug("include %s from %s", path, self.document.path)

        target = self.store.resolve(path)
        if not isinstance(target, Document):
            # missing link targets and folders contribute nothing
            logger.debug("nothing to include at %s", path)
            return

        if target.path in self.chain:
            if self.cycle_policy == "error":
                raise IncludeCycleError(self.chain + (target.path,))
            logger.warning(
                "include cycle skipped: %s", " → ".join(self.chain + (target.path,))
            )
            return

        Resolver(
            target,
            self.store,
            self.accumulator,
            self.file_extension,
            chain=self.chain,
            cycle_policy=self.cycle_policy,
        ).run()


__all__ = ["Resolver"]
