import logging

from whs_wiki.fetcher.store import DataStore, data_logger


def test_create_folders(store):
    store.create_folders()

    assert store.raw_dir.is_dir()
    assert store.markup_dir.is_dir()
    log = store.log_file.read_text(encoding="utf-8")
    assert log.count("created.") == 3


def test_data_events_stay_out_of_console(store, caplog):
    with caplog.at_level(logging.INFO):
        store.create_folders()

    assert "created" not in caplog.text
    assert "created" in store.log_file.read_text(encoding="utf-8")
    assert data_logger.propagate is False


def test_close_detaches_log(store):
    store.create_folders()
    store.close()

    assert not data_logger.handlers
    assert data_logger.propagate is True


def test_markup_path(store):
    assert store.markup_path("Abu Mena").name == "Abu_Mena.json"
    assert store.markup_path("AC/DC").name == "AC%2FDC.json"
    assert store.markup_path("Abu Mena") == store.markup_path("Abu_Mena")


def test_stores_share_log_handler(tmp_path):
    first = DataStore(str(tmp_path / "data"))
    second = DataStore(str(tmp_path / "data"))
    try:
        first.create_folders()
        second.create_folders()
        assert len(data_logger.handlers) == 1
    finally:
        first.close()
        second.close()
