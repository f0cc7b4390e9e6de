from pvzgame.animcheck import main

SAMPLE = """<fps>12</fps>
<track><name>flame</name>
<t><i>IMAGE_FIRE1</i></t>
<t><i>IMAGE_FIRE2</i></t>
</track>
"""


def test_main_lists_resources(tmp_path, capsys):
    path = tmp_path / "fire.reanim"
    path.write_text(SAMPLE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Animation loaded successfully!" in out
    lines = out.splitlines()
    assert lines[-2:] == [" >> IMAGE_FIRE1", " >> IMAGE_FIRE2"]


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.reanim")]) == 1
    out = capsys.readouterr().out
    assert "Failed to load animation." in out
    assert "Animation loaded successfully!" not in out


def test_main_invalid_file_fails(tmp_path, capsys):
    path = tmp_path / "broken.reanim"
    path.write_text("<fps>12</fps>")
    assert main([str(path)]) == 1
    assert "Failed to load animation." in capsys.readouterr().out