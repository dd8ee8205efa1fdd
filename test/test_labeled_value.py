import pytest
from pydantic import ValidationError

from labeled_data import LabeledValue


class TestLabeledValue:
    def test_default_value(self):
        number = LabeledValue.of(5)
        assert number.value == 5
        assert number.get_value() == 5
        assert number.get_default_value() == 5
        assert number.get_metadata() == {}

    def test_constructor_matches_of(self):
        assert LabeledValue(5).get_value() == LabeledValue.of(5).get_value()

    @pytest.mark.parametrize("default", [None, 0, "", [1, 2, 3], {"a": 1}, (1, 2)])
    def test_any_default_is_accepted(self, default):
        labeled = LabeledValue.of(default)
        assert labeled.get_value() == default
        assert labeled.get_default_value() == default

    def test_default_value_is_not_copied(self):
        items = [1, 2, 3]
        labeled = LabeledValue.of(items)
        assert labeled.get_default_value() is items
        assert labeled.get_value() is items

    def test_assignment(self):
        number = LabeledValue.of(5)
        number.value = 10
        assert number.value == 10
        assert number.get_default_value() == 5

    def test_set_value_chains(self):
        labeled = LabeledValue.of(5)
        assert labeled.set_value(10) is labeled
        assert labeled.get_value() == 10
        assert labeled.get_default_value() == 5

    def test_default_value_is_frozen(self):
        labeled = LabeledValue.of(5)
        with pytest.raises(ValidationError):
            labeled.default_value = 6
        assert labeled.get_default_value() == 5

    def test_no_runtime_type_checking(self):
        labeled = LabeledValue.of(5)
        labeled.set_value("five")
        assert labeled.get_value() == "five"

    def test_set_metadata_chains(self):
        greeting = LabeledValue.of('Hello world!').set_metadata({'length': 12})
        assert isinstance(greeting, LabeledValue)
        assert greeting.get_meta('length') == 12

    def test_meta_fields(self):
        dark_mode = LabeledValue.of(True).set_metadata({
            'label': 'Dark Mode',
            'description': 'Whether to turn on the dark mode.',
        })
        assert dark_mode.get_meta('label') == 'Dark Mode'
        assert dark_mode.get_meta('description') == 'Whether to turn on the dark mode.'

        dark_mode.set_meta('label', '夜间模式')
        dark_mode.set_meta('description', '是否打开夜间模式')
        assert dark_mode.get_meta('label') == '夜间模式'
        assert dark_mode.get_meta('description') == '是否打开夜间模式'

    def test_unset_meta_field(self):
        labeled = LabeledValue.of(1)
        assert labeled.get_meta('missing') is None
        assert labeled.get_meta('missing', 'fallback') == 'fallback'

    def test_set_meta_to_none_is_a_write(self):
        labeled = LabeledValue.of(1).set_metadata({'label': 'One'})
        assert labeled.set_meta('label', None) is None
        assert 'label' in labeled.get_metadata()
        assert labeled.get_meta('label', 'fallback') is None

    def test_metadata_is_live(self):
        labeled = LabeledValue.of(1)
        labeled.get_metadata()['label'] = 'One'
        assert labeled.get_meta('label') == 'One'

    def test_set_metadata_keeps_reference(self):
        metadata = {'label': 'Shared'}
        first = LabeledValue.of(1).set_metadata(metadata)
        second = LabeledValue.of(2).set_metadata(metadata)
        assert first.get_metadata() is metadata
        first.set_meta('label', 'Changed')
        assert second.get_meta('label') == 'Changed'

    def test_copy_metadata(self):
        labeled = LabeledValue.of(1).set_metadata({'label': 'One'})
        snapshot = labeled.copy_metadata()
        assert snapshot == labeled.get_metadata()
        assert snapshot is not labeled.get_metadata()
        snapshot['label'] = 'Changed'
        assert labeled.get_meta('label') == 'One'

    def test_clone(self):
        greeting = LabeledValue.of('Hello world!').set_metadata({'length': 12})
        greeting.set_value('Bye!')

        clone = greeting.clone()
        assert clone is not greeting
        assert clone.get_default_value() == 'Hello world!'
        assert clone.get_value() == 'Bye!'
        assert clone.get_metadata() == {'length': 12}
        assert clone.get_metadata() is not greeting.get_metadata()

        clone.set_meta('length', 4)
        clone.set_value('Hi!')
        assert greeting.get_meta('length') == 12
        assert greeting.get_value() == 'Bye!'

    def test_clone_sharing_metadata(self):
        greeting = LabeledValue.of('Hello world!').set_metadata({'length': 12})
        clone = greeting.clone(copy_metadata=False)
        assert clone.get_metadata() is greeting.get_metadata()

        clone.set_meta('length', 4)
        assert greeting.get_meta('length') == 4

    def test_clone_keeps_subclass(self):
        class Setting(LabeledValue):
            pass

        setting = Setting.of(3).set_metadata({'label': 'Three'})
        clone = setting.clone()
        assert type(clone) is Setting
        assert clone.get_value() == 3

    def test_clone_has_no_side_effects(self):
        labeled = LabeledValue.of(1).set_metadata({'label': 'One'})
        metadata = labeled.get_metadata()
        labeled.clone()
        labeled.clone(copy_metadata=False)
        assert labeled.get_metadata() is metadata
        assert labeled.get_metadata() == {'label': 'One'}
        assert labeled.get_value() == 1

    def test_repr(self):
        labeled = LabeledValue.of(1).set_value(2).set_metadata({'label': 'One'})
        text = repr(labeled)
        assert 'default_value=1' in text
        assert 'value=2' in text
        assert "'label': 'One'" in text
