from textprocessor.context import TextProcessorContext, DEFAULT_WORDS_PER_MINUTE
from textprocessor.datafile import load_data_file, save_default_directory_to_data_file


def write_data_file(path, content):
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_missing_file_keeps_defaults(tmp_path):
    ctx = load_data_file(data_file_path=str(tmp_path / "absent.txt"))
    assert ctx == TextProcessorContext()


def test_loads_every_section(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", (
        "# WORDS_PER_MINUTE\n250\n\n"
        "# AUTOSAVE_DELAY_MS\n500\n"
        "# NOTIFICATION_MS\n1500\n"
        "# DEFAULT_THEME\nDark\n"
        f"# DEFAULT_FILE_DIR\n{tmp_path}\n"
    ))
    ctx = load_data_file(data_file_path=data_file)
    assert ctx.words_per_minute == 250
    assert ctx.autosave_delay_ms == 500
    assert ctx.notification_ms == 1500
    assert ctx.theme == "dark"
    assert ctx.default_file_directory == tmp_path


def test_malformed_values_fall_back_to_defaults(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", (
        "# WORDS_PER_MINUTE\nfast\n"
        "# NOTIFICATION_MS\n0\n"
        "# DEFAULT_THEME\nsepia\n"
        f"# DEFAULT_FILE_DIR\n{tmp_path / 'nowhere'}\n"
    ))
    ctx = load_data_file(data_file_path=data_file)
    assert ctx.words_per_minute == DEFAULT_WORDS_PER_MINUTE
    assert ctx.notification_ms == 3000
    assert ctx.theme == "light"
    assert ctx.default_file_directory is None


def test_only_first_value_in_a_section_is_used(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", "# WORDS_PER_MINUTE\n# comment\n180\n300\n")
    assert load_data_file(data_file_path=data_file).words_per_minute == 180


def test_bom_before_marker_is_ignored(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", "\ufeff# WORDS_PER_MINUTE\n120\n")
    assert load_data_file(data_file_path=data_file).words_per_minute == 120


def test_populates_given_context(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", "# WORDS_PER_MINUTE\n150\n")
    ctx = TextProcessorContext(text="kept")
    assert load_data_file(ctx, data_file_path=data_file) is ctx
    assert ctx.text == "kept"
    assert ctx.words_per_minute == 150


def test_save_default_directory_creates_section(tmp_path):
    data_file = write_data_file(tmp_path / ".data.txt", "# WORDS_PER_MINUTE\n220\n")
    save_default_directory_to_data_file(str(tmp_path), data_file_path=data_file)

    ctx = load_data_file(data_file_path=data_file)
    assert ctx.words_per_minute == 220
    assert ctx.default_file_directory == tmp_path


def test_save_default_directory_replaces_existing_value(tmp_path):
    old_dir = tmp_path / "old"
    new_dir = tmp_path / "new"
    old_dir.mkdir()
    new_dir.mkdir()
    data_file = write_data_file(tmp_path / ".data.txt", (
        f"# DEFAULT_FILE_DIR\n{old_dir}\n\n"
        "# WORDS_PER_MINUTE\n210\n"
    ))

    save_default_directory_to_data_file(str(new_dir), data_file_path=data_file)

    content = (tmp_path / ".data.txt").read_text(encoding="utf-8")
    assert str(old_dir) + "\n" not in content
    assert content.count("# DEFAULT_FILE_DIR") == 1
    ctx = load_data_file(data_file_path=data_file)
    assert ctx.default_file_directory == new_dir
    assert ctx.words_per_minute == 210


def test_save_default_directory_to_new_file(tmp_path):
    data_file = str(tmp_path / "config" / ".data.txt")
    save_default_directory_to_data_file(str(tmp_path), data_file_path=data_file)
    assert load_data_file(data_file_path=data_file).default_file_directory == tmp_path
