import time

from app.core.metrics_translation import reset_latency_stats, snapshot_latency_stats


def test_translation_latency_smoke(client):
    reset_latency_stats()
    start = time.time()
    for _ in range(50):
        r = client.post('/api/translate', json={'banjaraText': 'namaskar tu kasan che kaldo gaddu'})
        assert r.status_code == 200
        assert r.json()['data']['englishText'] == 'Hello How are you Eat Egg'
    elapsed_ms = (time.time() - start) * 1000
    # Loose budget: dictionary-only path, no external calls
    assert elapsed_ms < 5000

    stats = snapshot_latency_stats()
    assert stats['count'] == 50
    assert stats['p95_ms'] < 100
