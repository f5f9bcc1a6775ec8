class MeshCache:
    """
    Owns uploaded meshes so scene objects built from the same geometry share
    one set of GPU buffers. Objects hold plain references; the cache destroys
    the meshes.
    """

    def __init__(self):
        self._meshes: dict = {}

    def __len__(self):
        return len(self._meshes)

    def get(self, key, factory):
        """
        :param key: Hashable description of the geometry
        :param factory: Called with no arguments to build the mesh on a miss
        :return: The cached mesh
        """
        if key not in self._meshes:
            self._meshes[key] = factory()
        return self._meshes[key]

    def clear(self):
        for mesh in self._meshes.values():
            mesh.destroy()
        self._meshes.clear()
