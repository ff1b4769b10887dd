from sqlalchemy import inspect

from mvcapp import database


def test_build_engine_sqlite_file(tmp_path):
    eng = database.build_engine(f"sqlite:///{tmp_path / 'x.db'}", echo=False)
    database.create_db_and_tables(eng)
    assert "students" in inspect(eng).get_table_names()
    eng.dispose()


def test_get_session_yields_and_closes(monkeypatch, engine):
    monkeypatch.setattr(database, "engine", engine)
    gen = database.get_session()
    session = next(gen)
    assert session.bind is engine
    gen.close()
