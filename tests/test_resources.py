import pytest
from PIL import Image

from starfighter.resources import Resource, ResourceManager, Texture
from starfighter.vector2 import Vector2


class Note(Resource):
    def __init__(self):
        super().__init__()
        self.text = None
        self.released = False

    def load(self, path, manager):
        with open(path, encoding="utf-8") as handle:
            self.text = handle.read()

    def _release(self):
        self.released = True


class SharedNote(Note):
    def is_cloneable(self):
        return True


@pytest.fixture
def content(tmp_path):
    Image.new("RGBA", (10, 6)).save(tmp_path / "ship.png")
    (tmp_path / "note.txt").write_text("hello", encoding="utf-8")
    manager = ResourceManager()
    manager.set_content_path(str(tmp_path) + "/")
    return manager, tmp_path


def test_texture_loads_dimensions(content):
    manager, _ = content
    texture = manager.load(Texture, "ship.png")
    assert (texture.width, texture.height) == (10, 6)
    assert texture.size == Vector2(10, 6)
    assert texture.center == texture.size / 2
    assert texture.resource_manager is manager


def test_cached_resource_is_shared(content):
    manager, _ = content
    first = manager.load(Texture, "ship.png")
    second = manager.load(Texture, "ship.png")
    assert first is second
    assert first.resource_id == 0


def test_uncached_resource_gets_new_objects_and_ids(content):
    manager, _ = content
    first = manager.load(Texture, "ship.png", cache=False)
    second = manager.load(Texture, "ship.png", cache=False)
    assert first is not second
    assert second.resource_id == first.resource_id + 1


def test_path_without_content_prefix(content):
    manager, tmp_path = content
    note = manager.load(Note, str(tmp_path / "note.txt"), append_content_path=False)
    assert note.text == "hello"


def test_missing_file_raises(content):
    manager, _ = content
    with pytest.raises(OSError):
        manager.load(Texture, "missing.png")


def test_failed_load_is_not_cached(content):
    manager, tmp_path = content
    with pytest.raises(OSError):
        manager.load(Note, "later.txt")
    (tmp_path / "later.txt").write_text("now", encoding="utf-8")
    assert manager.load(Note, "later.txt").text == "now"


def test_cloneable_resource_hands_out_clones(content):
    manager, _ = content
    original = manager.load(SharedNote, "note.txt")
    clone = manager.load(SharedNote, "note.txt")
    assert clone is not original
    assert clone.text == original.text
    assert clone.resource_id == original.resource_id + 1


def test_wrong_type_for_cached_path_raises(content):
    manager, _ = content
    manager.load(Note, "note.txt")
    with pytest.raises(TypeError):
        manager.load(Texture, "note.txt")


def test_unload_all_releases_and_forgets(content):
    manager, _ = content
    note = manager.load(SharedNote, "note.txt")
    clone = manager.load(SharedNote, "note.txt")
    texture = manager.load(Texture, "ship.png")
    manager.unload_all()
    assert note.released and clone.released
    assert texture.image is None
    assert manager.load(Texture, "ship.png") is not texture


def test_texture_is_not_cloneable():
    assert Texture().is_cloneable() is False


def test_set_size_updates_center():
    texture = Texture()
    texture.set_size(32, 16)
    assert texture.size == Vector2(32, 16)
    assert texture.center * 2 == texture.size