# tests/test_server.py
import catalog.main as server


def run_main(monkeypatch, argv):
    started = {}

    def fake_run(app, host, port):
        started.update(app=app, host=host, port=port)
    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    server.main(argv)
    return started

def test_import_builds_no_app():
    # the app (and its seeded store) only exists once main() or a factory call builds it
    assert not hasattr(server, "app")

def test_main_without_test_data(monkeypatch):
    started = run_main(monkeypatch, ["--no-testdata", "--addr", "127.0.0.1:18555"])
    assert (started["host"], started["port"]) == ("127.0.0.1", 18555)
    assert started["app"].state.store.all_ids() == []

def test_main_with_test_data(monkeypatch):
    started = run_main(monkeypatch, ["--testdata", "--addr", ":9000"])
    assert (started["host"], started["port"]) == ("0.0.0.0", 9000)
    # seeded exactly once, into the store that is served
    assert sorted(started["app"].state.store.all_ids()) == [1, 2]
