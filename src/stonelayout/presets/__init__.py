from stonelayout.presets.oob import OobPreset, load_preset, load_preset_files, parameters_from_oob, parse_oob
