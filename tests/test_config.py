from rmap_lib.config import ConfigService


def test_creates_file_with_defaults(tmp_path):
    path = tmp_path / "rmap.cfg"
    settings = ConfigService(str(path)).get_settings()
    assert path.is_file()
    assert settings["Paths"]["input_dir"] == "./bins"
    assert settings["Paths"]["extension"] == ".room"
    assert settings["Rooms"]["id_separator"] == "_Room_"
    assert settings["Render"]["cleanup_iterations"] == "10"


def test_file_values_override_defaults(tmp_path):
    path = tmp_path / "rmap.cfg"
    path.write_text("[Paths]\noutput_dir = ./renders\n\n[Render]\noutline = no\n")
    service = ConfigService(str(path))
    settings = service.get_settings()
    assert settings["Paths"]["output_dir"] == "./renders"
    assert settings["Paths"]["input_dir"] == "./bins"
    assert service.get_render_options()["outline"] is False


def test_render_options_are_typed(tmp_path):
    options = ConfigService(str(tmp_path / "rmap.cfg")).get_render_options()
    assert options["cleanup_iterations"] == 10
    assert options["outline"] is True
    assert options["solid_color"] == "#00FF00"


def test_invalid_iterations_fall_back(tmp_path):
    path = tmp_path / "rmap.cfg"
    path.write_text("[Render]\ncleanup_iterations = lots\n")
    options = ConfigService(str(path)).get_render_options()
    assert options["cleanup_iterations"] == 10


def test_save_settings_round_trip(tmp_path):
    service = ConfigService(str(tmp_path / "rmap.cfg"))
    settings = service.get_settings()
    settings["Render"]["cleanup_iterations"] = 4
    service.save_settings(settings)
    assert service.get_render_options()["cleanup_iterations"] == 4
