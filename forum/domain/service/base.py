"""Domain service base."""


class Service:
    """Marker base for forum domain services.

    Services hold the rules that span entities (votes need their target,
    replies need their parent) and are built per request by the container.
    """
