from PIL import Image

import kolamcanvas_cli
from kolam_canvas.strokes_csv import load_strokes_csv


def test_render_template(tmp_path):
    out = tmp_path / "star.png"
    csv_out = tmp_path / "star.csv"
    rc = kolamcanvas_cli.main(["--template", "star", "--symmetry", "--out", str(out), "--save-csv", str(csv_out)])
    assert rc == 0
    assert Image.open(out).size == (400, 400)
    paths, err = load_strokes_csv(csv_out)
    assert err is None
    assert len(paths[0]) == 11


def test_replay_csv(tmp_path):
    csv_path = tmp_path / "in.csv"
    csv_path.write_text("x-kolam 1,y-kolam 1\n10,10\n50,60\n90,20\n")
    out = tmp_path / "traced.jpg"
    rc = kolamcanvas_cli.main(["--csv", str(csv_path), "--out", str(out), "--size", "200", "--grid", "5"])
    assert rc == 0
    assert out.read_bytes().startswith(b"\xff\xd8")


def test_missing_csv(tmp_path):
    rc = kolamcanvas_cli.main(["--csv", str(tmp_path / "nope.csv"), "--out", str(tmp_path / "x.png")])
    assert rc == 1
