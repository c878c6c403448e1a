import pygame
import pytest

from computerroom.colour import Colour
from computerroom.geometry import Rectangle
from computerroom.renderer import BlendMode, Flip, Renderer
from computerroom.vector import Vector2


@pytest.fixture
def target():
    return pygame.Surface((640, 480))


@pytest.fixture
def renderer(target):
    return Renderer(target, 640, 480)


def rgb_at(surface, point):
    colour = surface.get_at(point)
    return (colour.r, colour.g, colour.b)


def test_fill_then_present_shows_colour():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.rgb(10, 200, 30)
    renderer.fill(Rectangle(100, 100, 50, 50))
    renderer.present()
    assert renderer.draw_colour == Colour.rgb(10, 200, 30)
    assert rgb_at(target, (120, 120)) == (10, 200, 30)
    assert rgb_at(target, (10, 10)) == (0, 0, 0)


def test_clear_colour_restores_draw_colour(renderer, target):
    renderer.draw_colour = Colour.RED
    renderer.clear_colour(0x1F, 0x1F, 0x1F)
    renderer.present()
    assert renderer.draw_colour == Colour.RED
    assert rgb_at(target, (300, 300)) == (0x1F, 0x1F, 0x1F)


def test_clear_uses_draw_colour():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.WHITE
    renderer.clear()
    renderer.present()
    assert renderer.draw_colour == Colour.WHITE
    assert rgb_at(target, (639, 479)) == (255, 255, 255)


def test_blend_with_zero_alpha_keeps_canvas():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.WHITE
    renderer.clear()
    renderer.set_blendmode(BlendMode.BLEND)
    renderer.draw_colour = Colour.rgba(0, 0, 0, 0)
    renderer.fill(Rectangle(0, 0, 640, 480))
    renderer.present()
    assert renderer.blendmode is BlendMode.BLEND
    assert rgb_at(target, (320, 240)) == (255, 255, 255)


def test_no_blend_ignores_alpha():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.WHITE
    renderer.clear()
    renderer.draw_colour = Colour.rgba(0, 0, 0, 0)
    renderer.fill(Rectangle(0, 0, 640, 480))
    renderer.present()
    assert renderer.blendmode is BlendMode.NONE
    assert rgb_at(target, (320, 240)) == (0, 0, 0)


def test_invalid_blend_mode_raises(renderer):
    with pytest.raises(ValueError):
        renderer.set_blendmode(BlendMode.INVALID)
    assert renderer.blendmode is BlendMode.NONE


def test_line_draws_from_start():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.rgb(0x90, 0x90, 0xFF)
    renderer.line(Vector2(10, 10), Vector2(40, 10))
    renderer.present()
    assert renderer.draw_colour == Colour.rgb(0x90, 0x90, 0xFF)
    assert rgb_at(target, (10, 10)) == (0x90, 0x90, 0xFF)
    assert rgb_at(target, (25, 10)) == (0x90, 0x90, 0xFF)


def _two_pixel_texture(size, first, second):
    texture = pygame.Surface(size)
    texture.set_at((0, 0), first)
    texture.set_at((size[0] - 1, size[1] - 1), second)
    return texture


def test_copy_horizontal_flip_swaps_columns():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    red, blue = (255, 0, 0), (0, 0, 255)
    texture = _two_pixel_texture((2, 1), red, blue)
    renderer.copy(texture, Rectangle(0, 0, 2, 1), 0.0, Flip.HORIZONTAL)
    renderer.present()
    assert rgb_at(target, (0, 0)) == blue
    assert rgb_at(target, (1, 0)) == red


def test_copy_vertical_flip_swaps_rows():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    red, blue = (255, 0, 0), (0, 0, 255)
    texture = _two_pixel_texture((1, 2), red, blue)
    renderer.copy(texture, Rectangle(0, 0, 1, 2), 0.0, Flip.VERTICAL)
    renderer.present()
    assert rgb_at(target, (0, 0)) == blue
    assert rgb_at(target, (0, 1)) == red


def test_copy_without_flip_keeps_layout():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    red, blue = (255, 0, 0), (0, 0, 255)
    texture = _two_pixel_texture((2, 1), red, blue)
    renderer.copy(texture, Rectangle(5, 5, 2, 1), 0.0, Flip.NONE)
    renderer.present()
    assert rgb_at(target, (5, 5)) == red
    assert rgb_at(target, (6, 5)) == blue


def test_copy_diagonal_flip_swaps_corners():
    target = pygame.Surface((640, 480))
    renderer = Renderer(target, 640, 480)
    red, blue = (255, 0, 0), (0, 0, 255)
    texture = _two_pixel_texture((2, 2), red, blue)
    renderer.copy(texture, Rectangle(0, 0, 2, 2), 0.0, Flip.DIAGONAL)
    renderer.present()
    assert Flip.DIAGONAL.horizontal and Flip.DIAGONAL.vertical
    assert Flip.HORIZONTAL.horizontal and not Flip.HORIZONTAL.vertical
    assert not Flip.NONE.horizontal and not Flip.NONE.vertical
    assert rgb_at(target, (0, 0)) == blue
    assert rgb_at(target, (1, 1)) == red


def test_copy_fill_stretches_texture(renderer, target):
    renderer.draw_colour = Colour.RED
    texture = pygame.Surface((4, 4))
    texture.fill((0, 255, 0))
    renderer.copy_fill(texture)
    renderer.present()
    assert renderer.draw_colour == Colour.RED
    assert renderer.blendmode is BlendMode.NONE
    assert rgb_at(target, (0, 0)) == (0, 255, 0)
    assert rgb_at(target, (639, 479)) == (0, 255, 0)


def test_copy_of_missing_texture_draws_nothing(renderer, target, tmp_path):
    renderer.draw_colour = Colour.WHITE
    missing = renderer.load_texture(tmp_path / "absent.png")
    renderer.copy(missing, Rectangle(0, 0, 640, 480), 0.0, Flip.NONE)
    renderer.copy_fill(missing)
    renderer.present()
    assert missing is None
    assert renderer.draw_colour == Colour.WHITE
    assert rgb_at(target, (320, 240)) == (0, 0, 0)


def test_load_missing_texture_returns_none(renderer, tmp_path):
    assert renderer.load_texture(tmp_path / "missing.png") is None


def test_load_texture_round_trip(renderer, tmp_path):
    image = pygame.Surface((3, 2))
    image.fill((12, 34, 56))
    path = tmp_path / "image.png"
    pygame.image.save(image, str(path))
    texture = renderer.load_texture(path)
    assert texture.get_size() == (3, 2)
    assert rgb_at(texture, (1, 1)) == (12, 34, 56)


def test_present_letterboxes_wide_target():
    target = pygame.Surface((1280, 480))
    renderer = Renderer(target, 640, 480)
    renderer.draw_colour = Colour.RED
    renderer.clear()
    renderer.present()
    assert rgb_at(target, (0, 0)) == (0, 0, 0)
    assert rgb_at(target, (1279, 240)) == (0, 0, 0)
    assert rgb_at(target, (640, 240)) == (255, 0, 0)


def test_text_draws_pixels(renderer, target):
    renderer.draw_colour = Colour.WHITE
    renderer.text(Vector2(5, 5), "FPS: 60")
    renderer.present()
    assert renderer.draw_colour == Colour.WHITE
    lit = [
        (x, y)
        for x in range(5, 80)
        for y in range(5, 25)
        if rgb_at(target, (x, y)) != (0, 0, 0)
    ]
    assert len(lit) > 0


def test_invalid_logical_size_raises(target):
    with pytest.raises(ValueError):
        Renderer(target, 0, 480)