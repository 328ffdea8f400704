import logging
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from casino_eats.configuration.settings import Configuration

configuration = Configuration()


def build_engine(database_url: str):
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        # SQLite en memoria necesita una sola conexión compartida entre hilos
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, echo=False, connect_args=connect_args, **kwargs)


engine = build_engine(configuration.connect_to_database())


def init_db(bind=None):
    # Registra las tablas antes de crearlas
    import casino_eats.models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logging.info("BASE DE DATOS >>> Tablas verificadas")


def drop_db(bind=None):
    SQLModel.metadata.drop_all(bind or engine)

