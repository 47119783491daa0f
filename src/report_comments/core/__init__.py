"""Pure comment-processing helpers consumed by the editor UI."""
