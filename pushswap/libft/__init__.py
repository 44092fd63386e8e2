"""Small character, conversion, string, memory and output helpers."""