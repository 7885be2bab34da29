def test_import_heroforge_package() -> None:
    import importlib

    module = importlib.import_module("heroforge")
    assert module.__version__


def test_import_factory_has_no_side_effects() -> None:
    from heroforge.services.factories import HeroIdSequence

    sequence = HeroIdSequence()
    assert sequence.next_id() == "hero_0"
