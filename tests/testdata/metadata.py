# pylint: disable=missing-docstring
path_to_config = "tests/testdata/config/config.yml"
path_to_invalid_batch_size_config = "tests/testdata/config/invalid_batch_size.yml"
path_to_unknown_key_config = "tests/testdata/config/unknown_key.yml"
path_to_invalid_yaml_config = "tests/testdata/config/invalid_yaml.yml"
