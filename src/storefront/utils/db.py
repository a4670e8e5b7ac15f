"""Create and drop SQL tables for the storefront domain's SQL-backed providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _load_models(domain: Domain, provider_name: str) -> None:
    # Touching ``_dao`` builds and registers the SQLAlchemy model for the element.
    for _, aggregate_record in domain.registry.aggregates.items():
        if aggregate_record.cls.meta_.provider == provider_name:
            domain.repository_for(aggregate_record.cls)._dao  # noqa: B018

    for _, entity_record in domain.registry.entities.items():
        if entity_record.cls.meta_.provider == provider_name:
            domain.repository_for(entity_record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> list[str]:
    """Create tables; returns the names of the providers that were set up."""
    prepared = []
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] not in _SQL_PROVIDERS:
                continue
            engine = create_engine(provider.conn_info["database_uri"])
            _load_models(domain, provider.name)
            provider._metadata.create_all(engine)
            prepared.append(name)
    return prepared


def drop_db(domain: Domain) -> list[str]:
    """Drop tables; returns the names of the providers that were cleared."""
    dropped = []
    with domain.domain_context():
        for name, provider in domain.providers.items():
            if provider.conn_info["provider"] not in _SQL_PROVIDERS:
                continue
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
            dropped.append(name)
    return dropped
