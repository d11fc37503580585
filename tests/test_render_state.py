from glyphterm.render import chars_for_pixels

from conftest import RecordingRenderer


def test_chars_for_pixels_floors():
    assert chars_for_pixels((800, 600), (8, 16)) == (100, 37)
    assert chars_for_pixels((7, 15), (8, 16)) == (0, 0)
    assert chars_for_pixels((-10, 32), (8, 16)) == (0, 2)


def test_initial_buffers_match_size():
    r = RecordingRenderer(cell=(10, 10), pixels=(105, 52))
    assert r.chars_size() == (10, 5)
    ink, paper, code = r.images()
    assert len(ink) == len(paper) == len(code) == 50


def test_resize_same_char_size_keeps_buffers():
    r = RecordingRenderer(cell=(8, 16), pixels=(80, 160))
    ink, _, _ = r.images()
    ink[0] = 42
    assert r.resize((87, 175)) is False
    assert r.images()[0] is ink
    assert r.images()[0][0] == 42
    assert r.pixel_size == (87, 175)


def test_resize_new_char_size_replaces_zero_filled():
    r = RecordingRenderer(cell=(8, 16), pixels=(80, 160))
    r.images()[2][:] = 65
    assert r.resize((160, 160)) is True
    ink, paper, code = r.images()
    assert r.chars_size() == (20, 10)
    assert len(code) == 200
    assert not code.any() and not ink.any() and not paper.any()


def test_lend_frame_wraps_live_arrays():
    r = RecordingRenderer()
    with r.lend_frame() as frame:
        assert (frame.width, frame.height) == r.chars_size()
        frame.text_image[3] = 9
        assert not frame.released
    assert frame.released
    assert r.images()[2][3] == 9
