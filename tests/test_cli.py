"""Tests for the colour-type CLI and command registry."""

import json
import os
from pathlib import Path

import pytest
from colour_type import registry
from colour_type.__main__ import main
from colour_type.commands._common import coerce_value
from colour_type.core.types import Command
from PIL import Image


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from a dir with a .git marker so no outside .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    for name in ('COLOUR_TYPE_STRICT', 'COLOUR_TYPE_PALETTE_LIMIT', 'COLOUR_TYPE_PALETTE_PRECISION'):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def _run_json(capsys: pytest.CaptureFixture, *argv: str) -> dict:
    main([*argv, '--json'])
    return json.loads(capsys.readouterr().out)


class TestRegistry:
    def test_discovers_commands(self) -> None:
        assert set(registry.discover()) == {'monochrome', 'negate', 'palette', 'show'}

    def test_all_are_commands(self) -> None:
        for cmd in registry.all_commands().values():
            assert isinstance(cmd, Command)

    def test_unknown_command(self) -> None:
        with pytest.raises(KeyError, match='Unknown command'):
            registry.get('blur')

    def test_helper_modules_skipped(self) -> None:
        assert '_common' not in registry.discover()

    def test_rediscovery_from_package_scan(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, '_registry', {})
        assert sorted(registry.discover()) == ['monochrome', 'negate', 'palette', 'show']


class TestCoerceValue:
    def test_channels(self) -> None:
        assert coerce_value('10, 20,30') == ['10', '20', '30']

    def test_hex_text(self) -> None:
        assert coerce_value('123456') == '123456'

    def test_decimal(self) -> None:
        assert coerce_value('123456', decimal=True) == 123456

    def test_decimal_ignores_hex_text(self) -> None:
        assert coerce_value('#abc', decimal=True) == '#abc'


class TestShow:
    def test_text_output(self, capsys: pytest.CaptureFixture) -> None:
        main(['show', '#abc'])
        out = capsys.readouterr().out
        assert '── #abc' in out
        assert '#aabbcc' in out
        assert str(0xAABBCC) in out

    def test_json_channels(self, capsys: pytest.CaptureFixture) -> None:
        result = _run_json(capsys, 'show', '10,20,30')['results'][0]
        assert result['input'] == '10,20,30'
        assert result['html'] == '#0a141e'
        assert result['rgb'] == {'r': 10, 'g': 20, 'b': 30}
        assert set(result['hsl']) == {'h', 's', 'l'}

    def test_json_decimal(self, capsys: pytest.CaptureFixture) -> None:
        result = _run_json(capsys, 'show', '--decimal', '16746496')['results'][0]
        assert result['html'] == '#ff8800'
        assert result['hex'] == 'ff8800'

    def test_several_values(self, capsys: pytest.CaptureFixture) -> None:
        results = _run_json(capsys, 'show', '#000', 'fff')['results']
        assert [r['decimal'] for r in results] == [0, 0xFFFFFF]

    def test_lenient_by_default(self, capsys: pytest.CaptureFixture) -> None:
        result = _run_json(capsys, 'show', 'zzff')['results'][0]
        assert result['decimal'] == 0xFF


class TestStrict:
    def test_flag_rejects_malformed_text(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['show', '--strict', '#ff00gg'])
        assert exc.value.code == 1
        assert 'not a hexadecimal colour' in capsys.readouterr().err

    def test_env_enables_strict(self, capsys: pytest.CaptureFixture, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('COLOUR_TYPE_STRICT', '1')
        with pytest.raises(SystemExit):
            main(['show', 'nope'])

    def test_valid_values_still_reported(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit):
            main(['show', '--strict', '#abc', 'nope', '--json'])
        payload = json.loads(capsys.readouterr().out)
        assert [r['html'] for r in payload['results']] == ['#aabbcc']
        assert len(payload['errors']) == 1


class TestTransforms:
    def test_negate(self, capsys: pytest.CaptureFixture) -> None:
        result = _run_json(capsys, 'negate', '#000')['results'][0]
        assert result['html'] == '#ffffff'

    def test_monochrome(self, capsys: pytest.CaptureFixture) -> None:
        results = _run_json(capsys, 'monochrome', '#333', '#ccc')['results']
        assert [r['html'] for r in results] == ['#010101', '#ffffff']


class TestPalette:
    @pytest.fixture
    def image(self, tmp_path: Path) -> Path:
        img = Image.new('RGB', (40, 40), (255, 0, 0))
        img.paste((0, 0, 255), (30, 0, 40, 40))
        path = tmp_path / 'swatch.png'
        img.save(path)
        return path

    def test_hex(self, capsys: pytest.CaptureFixture, image: Path) -> None:
        result = _run_json(capsys, 'palette', str(image), '--limit', '2', '--hex')['results'][0]
        assert result['colours'] == ['#ff0000', '#0000ff']

    def test_triples(self, capsys: pytest.CaptureFixture, image: Path) -> None:
        result = _run_json(capsys, 'palette', str(image), '--limit', '2')['results'][0]
        assert result['colours'] == [[255, 0, 0], [0, 0, 255]]

    def test_limit_from_env(
        self, capsys: pytest.CaptureFixture, image: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv('COLOUR_TYPE_PALETTE_LIMIT', '1')
        result = _run_json(capsys, 'palette', str(image))['results'][0]
        assert len(result['colours']) == 1

    def test_limit_from_dotenv(self, capsys: pytest.CaptureFixture, image: Path, isolated_env: Path) -> None:
        (isolated_env / '.env').write_text('COLOUR_TYPE_PALETTE_LIMIT=1\n')
        try:
            result = _run_json(capsys, 'palette', str(image))['results'][0]
        finally:
            os.environ.pop('COLOUR_TYPE_PALETTE_LIMIT', None)
        assert len(result['colours']) == 1

    def test_missing_image(self, capsys: pytest.CaptureFixture, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['palette', str(tmp_path / 'missing.png')])
        assert exc.value.code == 1
        assert 'image not found' in capsys.readouterr().err


class TestHelp:
    def test_lists_commands(self, capsys: pytest.CaptureFixture) -> None:
        main(['help'])
        out = capsys.readouterr().out
        for name in ('show', 'negate', 'monochrome', 'palette'):
            assert name in out

    def test_command_docs(self, capsys: pytest.CaptureFixture) -> None:
        main(['help', 'monochrome'])
        assert '#010101' in capsys.readouterr().out

    def test_unknown_topic(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['help', 'blur'])
        assert exc.value.code == 1

    def test_no_command(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
