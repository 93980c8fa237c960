import pytest

from watermonitor import create_app
from watermonitor.db import db
from watermonitor.dispatcher import get_queue
from watermonitor.models import Alert, DiseaseRiskPrediction
from watermonitor.processing import submit_reading

CONTAMINATED = dict(ph=5.0, turbidity=10, temperature=20, dissolved_oxygen=7, total_coliform=20, ecoli=3, chlorine=0.1)


@pytest.fixture
def app(tmp_path):
    app = create_app({"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'queue.db'}", "EVALUATION_ASYNC": True})
    app.testing = True
    with app.app_context():
        yield app
        get_queue().stop()
        db.session.remove()
        db.drop_all()


def test_background_evaluation(app):
    reading_ids = [submit_reading(CONTAMINATED) for _ in range(3)]
    get_queue().join()
    db.session.expire_all()
    assert len(reading_ids) == 3
    assert DiseaseRiskPrediction.query.count() == 3
    assert Alert.query.count() == 15


def test_worker_skips_missing_reading(app):
    submit_reading(CONTAMINATED)
    queue = get_queue()
    queue.submit(999)
    submit_reading(CONTAMINATED)
    queue.join()
    db.session.expire_all()
    assert DiseaseRiskPrediction.query.count() == 2
