"""Base service class for domain services."""


class Service:
    """Base class for forum domain services.

    Services hold the business rules that span several aggregates, such as
    keeping the interaction ledger and the score counters in step.
    """

    pass
