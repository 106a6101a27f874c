import json
import os
import sys
from pathlib import Path
from subprocess import run, PIPE

from sqlalchemy import create_engine

ROOT = Path(__file__).resolve().parents[1]

def _run_cli(tmp_path, *args, structure=None, extra_env=None):
    if structure is not None:
        path = tmp_path / "storage" / "app" / "model_structure.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(structure), encoding="utf-8")

    env = os.environ.copy()
    for var in ("MODEL_STRUCTURE_PATH", "MODELS_DIR", "MIGRATIONS_DIR", "DATABASE_URL",
                "MODEL_WRITE_POLICY", "PIVOT_MODEL_WRITE_POLICY"):
        env.pop(var, None)
    env["LARAVEL_BASE_PATH"] = str(tmp_path)
    env.update(extra_env or {})
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
    # Run CLI via the same interpreter
    cmd = [sys.executable, "-m", "scaffold.cli", *args]
    return run(cmd, stdout=PIPE, stderr=PIPE, text=True, cwd=tmp_path, env=env)

BLOG = {
    "models": {"Post": ["title:string", "body:text"], "Tag": ["name:string"]},
    "relations": {"belongsToMany": [{"Tag": "Post"}]},
}

def test_from_json_generates_files(tmp_path):
    proc = _run_cli(
        tmp_path, "from-json", structure=BLOG,
        extra_env={"DATABASE_URL": f"sqlite:///{tmp_path / 'app.db'}"},
    )
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert "All files generated successfully." in proc.stdout

    assert (tmp_path / "app" / "Models" / "Post.php").exists()
    assert (tmp_path / "app" / "Models" / "Tag.php").exists()
    assert (tmp_path / "app" / "Models" / "PostTag.php").exists()
    migrations = sorted(p.name for p in (tmp_path / "database" / "migrations").iterdir())
    assert len(migrations) == 3
    assert any(n.endswith("_create_posts_table.php") for n in migrations)
    assert any(n.endswith("_create_post_tag_table.php") for n in migrations)

def test_rerun_replaces_migrations_instead_of_accumulating(tmp_path):
    assert _run_cli(tmp_path, "from-json", "--no-db", structure=BLOG).returncode == 0
    proc = _run_cli(tmp_path, "from-json", "--no-db")
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert len(list((tmp_path / "database" / "migrations").iterdir())) == 3

def test_dry_run_touches_nothing(tmp_path):
    proc = _run_cli(tmp_path, "from-json", "--dry-run", "--no-db", structure=BLOG)
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert "DRY RUN PLAN" in proc.stdout
    assert "create_posts_table" in proc.stdout
    assert not (tmp_path / "app").exists()
    assert not (tmp_path / "database" / "migrations").exists()

def test_missing_structure_file_fails(tmp_path):
    proc = _run_cli(tmp_path, "from-json", "--no-db")
    assert proc.returncode == 1
    assert "not found" in proc.stdout

def test_validate(tmp_path):
    proc = _run_cli(tmp_path, "validate", structure=BLOG)
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert "is valid (2 models, 1 many-to-many relations)" in proc.stdout

def test_dry_run_does_not_create_sqlite_database(tmp_path):
    (tmp_path / "database").mkdir()
    proc = _run_cli(tmp_path, "from-json", "--dry-run", structure=BLOG)
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert "create_posts_table" in proc.stdout
    assert list((tmp_path / "database").iterdir()) == []

def test_dry_run_reads_existing_sqlite_database(tmp_path):
    db_file = tmp_path / "database" / "database.sqlite"
    db_file.parent.mkdir()
    engine = create_engine(f"sqlite:///{db_file}", future=True)
    with engine.begin() as c:
        c.exec_driver_sql("CREATE TABLE posts (id INTEGER PRIMARY KEY, title VARCHAR(255))")
    engine.dispose()
    before = db_file.read_bytes()

    proc = _run_cli(tmp_path, "from-json", "--dry-run", structure=BLOG)
    assert proc.returncode == 0, f"CLI failed: {proc.stderr}"
    assert "add_body_to_posts_table" in proc.stdout
    assert sorted(p.name for p in db_file.parent.iterdir()) == ["database.sqlite"]
    assert db_file.read_bytes() == before
