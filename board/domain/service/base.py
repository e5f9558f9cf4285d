"""Base service class for domain services."""

import logfire

from board.domain.error import NotAuthorizedError
from board.domain.value import Actor, AuthorName


class Service:
    """Base class for all domain services.

    Services that mutate authored content share the ownership check below.
    """

    @staticmethod
    def _require_author(
        actor: Actor, author: AuthorName, resource: str, resource_id: str
    ) -> None:
        """Let only the author of a post or comment modify it.

        Raises:
            NotAuthorizedError: If the actor's display name differs from
                the stored author string
        """
        if actor.can_modify(author):
            return

        logfire.warn(
            "Modification rejected: not the author",
            resource=resource,
            resource_id=resource_id,
            author=author.root,
            actor=actor.display_name.root,
        )
        raise NotAuthorizedError(resource, resource_id, actor.display_name.root)
