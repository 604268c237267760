from mazedash.config import DEFAULT_CONFIG, ConfigError, MazeConfig, load_config

def expect_config_error(fn):
    try:
        fn()
    except ConfigError:
        return
    raise AssertionError("expected ConfigError")

def test_defaults_match_game():
    c = DEFAULT_CONFIG
    assert (c.size, c.path_width, c.wall_height) == (50, 4, 7)
    assert (c.platform_width, c.platform_depth) == (10, 10)
    assert c.seed == 12345 and c.wall_seed == 54321
    assert c.loop_density == 0.1

def test_degenerate_settings_refused():
    for kw in ({"size": 0}, {"size": -4}, {"path_width": 0}, {"wall_height": 0},
               {"platform_depth": -1}, {"loop_density": -0.5}):
        expect_config_error(lambda: MazeConfig(**kw))

def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)

def test_from_mapping_coerces_and_rejects():
    c = MazeConfig.from_mapping({"size": "12", "seed": 7, "loop_density": "0.25"})
    assert c.size == 12 and c.seed == 7 and c.loop_density == 0.25
    expect_config_error(lambda: MazeConfig.from_mapping({"colour": "red"}))
    expect_config_error(lambda: MazeConfig.from_mapping({"size": "big"}))

def test_replace_revalidates():
    assert DEFAULT_CONFIG.replace(seed=9).seed == 9
    expect_config_error(lambda: DEFAULT_CONFIG.replace(size=0))

def test_load_merges_yaml_and_env(tmp_path):
    base = tmp_path / "maze.yaml"
    local = tmp_path / "local.yaml"
    base.write_text("maze:\n  size: 20\n  seed: 1\n  wall_height: 3\n", encoding="utf-8")
    local.write_text("seed: 2\n", encoding="utf-8")
    c = load_config(base, local, env={"MAZEDASH_WALL_HEIGHT": "5"})
    assert c.size == 20 and c.seed == 2 and c.wall_height == 5
    assert c.path_width == 4

def test_load_missing_files_gives_defaults(tmp_path):
    c = load_config(tmp_path / "nope.yaml", tmp_path / "nope2.yaml", env={})
    assert c == DEFAULT_CONFIG

def test_load_rejects_non_mapping(tmp_path):
    base = tmp_path / "maze.yaml"
    base.write_text("- 1\n- 2\n", encoding="utf-8")
    expect_config_error(lambda: load_config(base, None, env={}))
