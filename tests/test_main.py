"""End-to-end tests for both command-line entry points."""
import pytest
from PIL import Image

from image_combiner.cli import parse_accumulate_args, parse_channel_args
from image_combiner.errors import ArgumentError, ColorParseError
from image_combiner.main import accumulate_main, channels_main


def _rgb_at(path, xy=(0, 0)):
    with Image.open(path) as im:
        assert im.format == "JPEG"
        return im.size, im.convert("RGB").getpixel(xy)


class TestAccumulateArgs:
    def test_pairs_and_output(self):
        config = parse_accumulate_args(["a.png", "red", "b.png", "#00ff00", "out.jpg"])
        assert [str(s.path) for s in config.inputs] == ["a.png", "b.png"]
        assert config.inputs[1].color == parse_accumulate_args(["x", "lime", "o"]).inputs[0].color
        assert str(config.output) == "out.jpg"
        assert config.quality == 100

    @pytest.mark.parametrize("argv", [[], ["a.png"], ["a.png", "red"], ["a.png", "red", "b.png", "out.jpg"]])
    def test_wrong_arity(self, argv):
        with pytest.raises(ArgumentError):
            parse_accumulate_args(argv)

    def test_bad_color(self):
        with pytest.raises(ColorParseError):
            parse_accumulate_args(["a.png", "xyz123", "out.jpg"])

    def test_double_dash_allows_dash_prefixed_paths(self):
        config = parse_accumulate_args(["--", "-a.png", "red", "-out.jpg"])
        assert str(config.inputs[0].path) == "-a.png"
        assert str(config.output) == "-out.jpg"

    def test_usage_mentions_double_dash(self, capsys):
        assert accumulate_main(["-a.png", "red", "out.jpg"]) == 1
        assert "[--]" in capsys.readouterr().out


class TestChannelArgs:
    def test_all_flags(self):
        config = parse_channel_args(["-r", "r.png", "-g", "g.png", "-b", "b.png", "-output", "o.jpg"])
        assert [str(p) for p in config.channel_paths()] == ["r.png", "g.png", "b.png"]
        assert str(config.output) == "o.jpg"

    def test_double_dash_output_alias(self):
        config = parse_channel_args(["-r", "r", "-g", "g", "-b", "b", "--output", "o.jpg"])
        assert str(config.output) == "o.jpg"

    def test_missing_color_flag(self):
        with pytest.raises(ArgumentError, match="every color"):
            parse_channel_args(["-r", "r.png", "-g", "g.png", "-output", "o.jpg"])

    def test_missing_output(self):
        with pytest.raises(ArgumentError, match="output filename"):
            parse_channel_args(["-r", "r.png", "-g", "g.png", "-b", "b.png"])

    def test_unknown_flag_is_argument_error(self):
        with pytest.raises(ArgumentError):
            parse_channel_args(["-x", "1"])


class TestAccumulateMain:
    def test_red_plus_green_is_yellow(self, make_image, tmp_path, capsys):
        a = make_image("a.png", size=(4, 4))
        b = make_image("b.png", size=(4, 4))
        out = tmp_path / "yellow.jpg"
        assert accumulate_main([str(a), "ff0000", str(b), "00ff00", str(out)]) == 0
        size, (r, g, bl) = _rgb_at(out, (2, 3))
        assert size == (4, 4)
        assert r >= 250 and g >= 250 and bl <= 8
        assert "Combining images into a 4x4 image." in capsys.readouterr().out

    def test_argument_error_prints_usage(self, capsys):
        assert accumulate_main(["a.png", "red"]) == 1
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "usage: image-combine" in out

    def test_missing_input_exits_1(self, tmp_path, capsys):
        rc = accumulate_main([str(tmp_path / "gone.png"), "red", str(tmp_path / "o.jpg")])
        assert rc == 1
        assert "gone.png" in capsys.readouterr().out

    def test_oversized_input_exits_1(self, huge_png, tmp_path, capsys):
        assert accumulate_main([str(huge_png), "red", str(tmp_path / "o.jpg")]) == 1
        assert "huge.png" in capsys.readouterr().out


class TestChannelsMain:
    def test_combines_three_grayscale_images(self, make_image, tmp_path, capsys):
        r = make_image("r.png", size=(3, 2), fill=(255, 255, 255))
        g = make_image("g.png", size=(3, 2), fill=(0, 0, 0))
        b = make_image("b.png", size=(3, 2), fill=(255, 255, 255))
        out = tmp_path / "magenta.jpg"
        assert channels_main(["-r", str(r), "-g", str(g), "-b", str(b), "-output", str(out)]) == 0
        size, (rr, gg, bb) = _rgb_at(out)
        assert size == (3, 2)
        assert rr >= 245 and gg <= 10 and bb >= 245
        out_text = capsys.readouterr().out
        assert "Setting channel 1 (red) using" in out_text
        assert "Setting channel 3 (blue) using" in out_text

    def test_missing_flag_exits_1(self, capsys):
        assert channels_main(["-r", "r.png", "-output", "o.jpg"]) == 1
        out = capsys.readouterr().out
        assert "An image must be supplied for every color." in out
        assert "Run with -h for more information." in out

    def test_decode_error_exits_1(self, tmp_path, capsys):
        bad = tmp_path / "bad.png"
        bad.write_bytes(b"nope")
        args = ["-r", str(bad), "-g", str(bad), "-b", str(bad), "-output", str(tmp_path / "o.jpg")]
        assert channels_main(args) == 1
        assert "bad.png" in capsys.readouterr().out
