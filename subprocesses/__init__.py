# subprocesses package - side processes started at boot.
# Each module exposes main(client, config, base_dir) and is listed by name
# under `subprocesses` in config.json.
