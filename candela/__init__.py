"""CPU-side rendering helpers: BVH split selection, camera, math, meshes and shader sources."""

__version__ = "0.1.0"

__all__ = [
    "logger",
    "include",
    "mesh",
    "entity",
    "maths",
    "bvh_split",
    "camera",
    "shader_source",
    "compute_source",
]