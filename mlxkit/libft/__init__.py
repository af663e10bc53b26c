"""Character, string, byte-buffer and file-descriptor output helpers."""