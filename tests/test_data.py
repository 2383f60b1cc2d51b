from shardstream.data import Data, get_last_data


def test_default_record_is_empty():
    assert Data() == Data(id=0, name="", value="")


def test_clean_up_values_strips_quotes():
    data = Data(id=1, name='"Car"', value='""Mustang""')
    data.clean_up_values()
    assert data.name == "Car"
    assert data.value == "Mustang"
    assert data.id == 1


def test_clean_up_values_keeps_inner_quotes():
    data = Data(name='"a"b"', value='plain')
    data.clean_up_values()
    assert data.name == 'a"b'
    assert data.value == "plain"


def test_clean_up_values_is_idempotent():
    data = Data(name='"x"', value='"y"')
    data.clean_up_values()
    once = Data(id=data.id, name=data.name, value=data.value)
    data.clean_up_values()
    assert data == once


def test_get_last_data_returns_last_item():
    items = [Data(id=1, name="a"), Data(id=2, name="b")]
    assert get_last_data(items) == Data(id=2, name="b")


def test_get_last_data_of_empty_is_default():
    assert get_last_data([]) == Data()


def test_get_last_data_accepts_generator():
    result = get_last_data(Data(id=i) for i in range(3))
    assert result.id == 2