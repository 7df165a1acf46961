"""Namespace reserved for Service Registry file caches; it holds none yet."""