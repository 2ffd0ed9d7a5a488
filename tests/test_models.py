"""
tests/test_models.py — JSON mapping of the form records and numeric parsing.
"""

import pytest

from models import parse_int, Observation, Horizon, Sheet1Data, Sheet1Header, Sheet2Data, User


class TestParseInt:

    def test_plain_numbers(self):
        assert parse_int('35') == 35
        assert parse_int('-4') == -4
        assert parse_int(12) == 12

    def test_leading_integer_is_kept(self):
        assert parse_int(' 20cm') == 20
        assert parse_int('7.9') == 7

    def test_garbage_is_zero(self):
        assert parse_int('') == 0
        assert parse_int('abc') == 0
        assert parse_int(None) == 0


def test_observation_uses_camel_case_keys():
    data = Observation(depth_from=0, depth_to=20, rock_fragments='5–15%').to_dict()
    assert data['depthFrom'] == 0
    assert data['depthTo'] == 20
    assert data['rockFragments'] == '5–15%'
    assert 'rock_fragments' not in data


def test_horizon_has_all_fields():
    keys = set(Horizon().to_dict())
    assert {'label', 'depthFrom', 'depthTo', 'boundaryDistinct', 'boundaryTopo',
            'structureGrade', 'consistenceWet', 'coarseFragments', 'sampleNo'} <= keys
    assert len(keys) == 23


def test_horizon_defaults():
    horizon = Horizon()
    assert horizon.mottles == 'None'
    assert horizon.lime == 'None visible'
    assert horizon.coarse_fragments == '0–5%'
    assert horizon.label == ''


def test_header_has_21_fields():
    assert len(Sheet1Header.field_names()) == 21
    assert Sheet1Header().to_dict()['nwSubWatershed'] == ''


def test_from_dict_tolerates_missing_and_unknown_keys():
    horizon = Horizon.from_dict({'label': 'Bt', 'depthFrom': '15', 'colourName': 'x'})
    assert horizon.label == 'Bt'
    assert horizon.depth_from == 15
    assert horizon.depth_to == 0
    assert horizon.cutans == 'None'


def test_sheet1_round_trip():
    sheet1 = Sheet1Data(
        header=Sheet1Header(village='Kothur', slope=3),
        observations=[Observation(depth_from=0, depth_to=25, texture='SL')],
    )
    assert Sheet1Data.from_dict(sheet1.to_dict()) == sheet1


def test_sheet1_from_none_is_empty():
    sheet1 = Sheet1Data.from_dict(None)
    assert sheet1.observations == []
    assert sheet1.header.state == 'Telangana'


def test_user_keys():
    assert User(username='Guest', logged_in_at='2026-01-01T00:00:00.000Z').to_dict() == {
        'username': 'Guest', 'loggedInAt': '2026-01-01T00:00:00.000Z'
    }


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Observation.from_dict(1)
    with pytest.raises(ValueError):
        Horizon.from_dict(['Ap'])


def test_from_dict_converts_scalar_text_to_str():
    horizon = Horizon.from_dict({'label': 5, 'sampleNo': 12.5, 'texture': True})
    assert horizon.label == '5'
    assert horizon.sample_no == '12.5'
    assert horizon.texture == 'True'


def test_from_dict_rejects_nested_text_values():
    with pytest.raises(ValueError):
        Horizon.from_dict({'label': {'name': 'Ap'}})
    with pytest.raises(ValueError):
        Observation.from_dict({'colour': ['10YR', '3/2']})


def test_sheet_rows_must_be_lists_of_objects():
    with pytest.raises(ValueError):
        Sheet1Data.from_dict({'observations': [1]})
    with pytest.raises(ValueError):
        Sheet1Data.from_dict({'observations': {'depthFrom': 0}})
    with pytest.raises(ValueError):
        Sheet1Data.from_dict({'header': 'Kothur'})
    with pytest.raises(ValueError):
        Sheet2Data.from_dict({'horizons': 'Ap'})
    with pytest.raises(ValueError):
        Sheet2Data.from_dict('horizons')
