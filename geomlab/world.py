# world.py
import json
import logging
from pathlib import Path

from geomlab.gameobjects.camera import Camera
from geomlab.gameobjects.mesh_cache import MeshCache
from geomlab.gameobjects.object import GameObject
from geomlab.gameobjects.transform import Transform
from geomlab.geometry.registry import generate, scale_params
from geomlab.geometry.types import WHITE, GeometryPair, GeometryType, check_color, offset_positions

logger = logging.getLogger(__name__)


class SceneEntry:
    def __init__(
        self,
        name: str,
        shape: str,
        topology: GeometryType,
        params: dict,
        color=WHITE,
        scale_factor: float = 1.0,
        z_offset: float = 0.0,
        offset=(0.0, 0.0, 0.0),
        position=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
        spin=(0.0, 0.0, 0.0),
    ):
        """
        One drawable layer of a scene object: the solid shape or one of its
        wireframe/point overlays. The geometry is generated right away so a bad
        entry fails while the scene loads.

        :param scale_factor: Multiplier for the size parameters (overlays sit
            slightly outside the solid)
        :param z_offset: Added to every vertex z after generation
        :param offset: Model-space shift of the generated geometry; moves the
            pivot that rotation and spin turn about
        """
        self.name = name
        self.shape = shape
        self.topology = topology
        self.params = dict(params)
        self.color = check_color(color)
        self.scale_factor = scale_factor
        self.z_offset = z_offset
        self.offset = tuple(float(v) for v in offset)
        self.position = position
        self.rotation = rotation
        self.scale = scale
        self.spin = spin

        pair = generate(
            shape, topology, color=self.color, **scale_params(self.params, scale_factor)
        )
        dx, dy, dz = self.offset
        if dx or dy or dz or z_offset:
            pair = offset_positions(pair, dx, dy, dz + z_offset)
        self.pair: GeometryPair = pair

    @property
    def key(self) -> tuple:
        return (
            self.shape,
            self.topology.value,
            tuple(sorted(self.params.items())),
            self.color,
            self.scale_factor,
            self.z_offset,
            self.offset,
        )


class World:
    def __init__(self, level_path: str | None = None):
        """
        Docstring für __init__

        :param self: The object itself
        :param level_path: Optional scene file to load right away
        """
        self.title = "Geometry Lab"
        self.camera = Camera()
        self.culling = False
        self.line_width: float | None = None
        self.entries: list[SceneEntry] = []
        if level_path:
            self.load_level(level_path)

    def _create_entries(self, index: int, data: dict):
        """
        Docstring für _create_entries

        :param self: The object itself
        :param index: Position of the object in the scene file
        :param data: dict with object parameters
        :type data: dict
        """
        shape = data.get("shape")
        if not shape:
            raise ValueError(f"Scene object {index} has no shape")

        name = data.get("name", f"{shape}_{index}")
        params = data.get("params", {})

        # ---------- transform ----------
        placement = {
            "position": data.get("position", [0, 0, 0]),
            "rotation": data.get("rotation", [0, 0, 0]),
            "scale": data.get("scale", [1, 1, 1]),
            "spin": data.get("spin", [0, 0, 0]),
        }
        offset = data.get("offset", [0, 0, 0])

        # ---------- layers ----------
        layers = [
            {
                "topology": data.get("topology", "triangles"),
                "color": data.get("color", WHITE),
            }
        ]
        layers.extend(data.get("overlays", []))

        for layer in layers:
            topology = GeometryType.parse(layer.get("topology", "triangles"))
            try:
                entry = SceneEntry(
                    name=f"{name}:{topology.value}",
                    shape=shape,
                    topology=topology,
                    params=params,
                    color=layer.get("color", WHITE),
                    scale_factor=layer.get("scale", 1.0),
                    z_offset=layer.get("z_offset", 0.0),
                    offset=offset,
                    **placement,
                )
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Scene object {index} ({shape}): {exc}") from exc
            self.entries.append(entry)

    def load_level(self, level_path: str):
        """
        Docstring für load_level

        :param self: The object itself
        :param level_path: Path to the level file
        :type level_path: str
        """
        path = Path(level_path)
        if not path.exists():
            raise FileNotFoundError(f"Level file not found: {level_path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.title = data.get("title", self.title)

        camera = data.get("camera", {})
        self.camera = Camera(
            position=camera.get("position", [0.0, 0.0, 2.0]),
            rotation=camera.get("rotation", [0.0, 0.0, 0.0]),
        )
        self.culling = bool(data.get("culling", False))
        self.line_width = data.get("line_width")

        self.entries = []
        for index, entry in enumerate(data.get("objects", [])):
            self._create_entries(index, entry)

        logger.info("loaded scene %r from %s: %d layers", self.title, path, len(self.entries))

    def build_objects(self, cache: MeshCache, mesh_factory) -> list[GameObject]:
        """
        Upload each layer's geometry (once per distinct geometry) and wrap it
        in a GameObject.

        :param cache: Owner of the uploaded meshes
        :param mesh_factory: Callable (topology, pair) -> mesh
        """
        objects = []
        for entry in self.entries:
            mesh = cache.get(entry.key, lambda e=entry: mesh_factory(e.topology, e.pair))
            objects.append(
                GameObject(
                    mesh=mesh,
                    transform=Transform(
                        position=entry.position,
                        rotation=entry.rotation,
                        scale=entry.scale,
                    ),
                    spin=entry.spin,
                    name=entry.name,
                )
            )
        return objects
