"""Signature help for function calls and mixin includes."""

import logging
from typing import Optional

from lsprotocol import types as lsp

from ..models import TextDocument
from .base import Query

logger = logging.getLogger(__name__)


class SignatureHelpQuery(Query[Optional[lsp.SignatureHelp]]):
    """Find the callee of the call around the cursor.

    Choosing a signature by argument count is not implemented yet, so the
    result is always None; the lookup only feeds the debug log.
    """

    def execute(self, document: TextDocument, position: lsp.Position) -> Optional[lsp.SignatureHelp]:
        reference = self.call_at(document, position)
        if reference is None:
            return None

        result = self.resolver.resolve(reference.name, reference.kind, self.document_links(document))
        logger.debug(f"Signature help for {reference.kind.value} {reference.name}: {len(result.candidates)} candidates")
        return None
