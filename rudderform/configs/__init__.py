"""Dotted JSON paths, config properties, schemas, metadata, registries and validators."""