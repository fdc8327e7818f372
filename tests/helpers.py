def read_log(log_dir):
    files = sorted(log_dir.glob("test_*.log"))
    return "".join(f.read_text(encoding="utf-8") for f in files)
