# rastertrace

A small software renderer written in Python on top of numpy and Pillow. It has two parts:

- **Rasterizing.** `Framebuffer` (in `rastertrace.framebuffer`) draws into an RGBA pixel buffer. It can draw points, rectangles, lines, triangle outlines, circles, linear, quadratic and cubic curves, and images. Pixels are combined through the blend mode chosen with `rastertrace.color.set_blend_mode`. The modes are `NORMAL`, `ALPHA`, `ADDITIVE` and `MULTIPLY`. `ProjectionCamera`, `WireModel` and `Actor` draw triangle meshes as wireframes through a look-at and perspective camera.
- **Ray tracing.** `Scene` and `trace` (in `rastertrace.scene`) form a small Monte-Carlo path tracer that renders into the same `Framebuffer`. They work with the following pieces:
  - `Camera` in `rastertrace.camera`
  - the shapes `Sphere`, `Plane` and `Triangle` in `rastertrace.shapes`
  - the triangle mesh `Model` in `rastertrace.mesh`
  - the materials `Lambertian` (diffuse) and `Emissive` (light source) in `rastertrace.material`

Meshes are read from the vertex (`v`) and face (`f`) lines of Wavefront OBJ files with `rastertrace.objfile.read_obj` or `parse_obj`. Images are loaded as RGBA with `rastertrace.image.load_image`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Rasterizing

A blend mode must be set before anything is drawn. Drawing without one raises `RuntimeError`.

```python
from rastertrace.color import BlendMode, Color, set_blend_mode
from rastertrace.framebuffer import Framebuffer

set_blend_mode(BlendMode.NORMAL)
fb = Framebuffer(200, 150)
fb.clear(Color(0, 0, 0, 255))
fb.draw_line(10, 10, 190, 140, Color(255, 255, 255, 255))
fb.draw_circle(100, 75, 40, Color(255, 0, 0, 255))
fb.draw_cubic_curve(10, 140, 60, 10, 140, 10, 190, 140, Color(0, 255, 0, 255))
```

`draw_point`, `draw_line` and `draw_circle` raise `IndexError` for a pixel outside the buffer. These methods clip to the buffer instead:

- `draw_point_clip`
- `draw_line_slope`
- `draw_rect`
- `draw_image`

`clip_line` clips a segment to the buffer with the Cohen-Sutherland method. It returns the new endpoints, or `None` when the segment misses the buffer.

`to_bytes()` returns the pixels as tightly packed RGBA rows, which Pillow can save:

```python
from PIL import Image as PILImage

PILImage.frombytes("RGBA", (fb.width, fb.height), fb.to_bytes()).save("out.png")
```

### Wireframes

```python
import math

from rastertrace.actor import Actor
from rastertrace.color import Color
from rastertrace.projection import ProjectionCamera
from rastertrace.transform import Transform
from rastertrace.wiremodel import WireModel

camera = ProjectionCamera(fb.width, fb.height)
camera.set_view((0, 0, -20), (0, 0, 0))
camera.set_projection(math.radians(60), fb.width / fb.height, 0.1, 200.0)

model = WireModel()
model.load("cube.obj")
actor = Actor(Transform((0, 0, 0), (0, 45, 0), 2.0), model, Color(0, 255, 0, 255))
actor.draw(fb, camera)
```

Any triangle with a vertex that does not project inside the framebuffer is skipped.

## Ray tracing

```python
from rastertrace.camera import Camera
from rastertrace.color import BlendMode, set_blend_mode
from rastertrace.framebuffer import Framebuffer
from rastertrace.material import Lambertian
from rastertrace.scene import Scene
from rastertrace.shapes import Plane, Sphere
from rastertrace.transform import Transform

set_blend_mode(BlendMode.NORMAL)
fb = Framebuffer(80, 60)
camera = Camera(70.0, fb.width / fb.height)
camera.set_view((0, 2, -6), (0, 0, 0), (0, 1, 0))

scene = Scene()
scene.add_object(Plane(Transform((0, 0, 0)), Lambertian(0.5)))
scene.add_object(Sphere(Transform((0, 1, 0)), 1.0, Lambertian((0.4, 0.2, 0.1))))
scene.update()
scene.render(fb, camera, 10, 3)
```

`render` averages `num_samples` jittered rays for each pixel and follows at most `depth` bounces. Rays that hit nothing take their colour from a vertical sky gradient, which `Scene.set_sky(bottom, top)` changes. Timings for each row and for the whole frame are logged at debug level through the `rastertrace.scene` logger.

To get the colour along a single ray, call `trace(scene, ray, min_distance, max_distance, depth)`.

## Post-processing

The functions in `rastertrace.postprocess` take a list of `Color` pixels and return a new list. The input is left unchanged.

```python
from rastertrace import postprocess

fb.buffer = postprocess.monochrome(fb.buffer)
fb.buffer = postprocess.edge(fb.buffer, fb.width, fb.height, 32)
```

The available filters are:

- `invert`
- `monochrome`
- `brightness`
- `color_balance`
- `noise`
- `threshold`
- `posterize`
- `alpha`
- `box_blur`
- `gaussian_blur`
- `sharpen`
- `edge`
- `emboss`

The 3x3 filters leave the one-pixel border of the image untouched.

## What it does not do

rastertrace is a library only. It has no command-line program, and it does not open a window, show frames on screen or read keyboard and mouse input. Rendered pixels stay in memory until you save them, for example with Pillow as shown above. The path tracer has diffuse and emissive materials only; there are no metal or glass materials.

## Running the tests

```
pytest
```