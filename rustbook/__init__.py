"""RustBook - interactive Rust lesson viewer."""
