## profilesweep drawable for on-screen drawing with the pyglet package
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import math

import pyglet
from pyglet import graphics, shapes

import profilesweep.drawable as drawable

## class to collect drawing calls into a pyglet batch.  Every call
## gets its own ordered group, so the batch draws in call order and
## the painter's algorithm of the renderers is preserved.  Screen
## coordinates (y down) are flipped to pyglet's bottom-left origin.
class PygletDraw(drawable.Drawable):
    """
    profilesweep ``drawable`` subclass for OpenGL rendering with pyglet
    """

    def __init__(self,width=800,height=600):
        super().__init__(width,height)
        self.__arcres = 24
        self.__background = [0,0,0]
        self.reset()

    def __repr__(self):
        return 'an instance of PygletDraw'

    def reset(self):
        self.__batch = graphics.Batch()
        self.__shapes = []      # keep references, pyglet deletes collected shapes
        self.__order = 0

    @property
    def background(self):
        return self.__background

    def _group(self):
        self.__order += 1
        return graphics.Group(order=self.__order)

    def _flip(self,p):
        return (p[0],self.height-p[1])

    def _keep(self,shape):
        self.__shapes.append(shape)
        return shape

    ## Overload virtual profilesweep.drawable base class drawing methods

    def clear(self,color='black'):
        self.reset()
        self.__background = self.thing2color(color,'b')

    def draw_line(self,p1,p2):
        a = self._flip(p1)
        b = self._flip(p2)
        self._keep(shapes.Line(a[0],a[1],b[0],b[1],self.linewidth,
                               color=self.line_rgba(),
                               batch=self.__batch,group=self._group()))

    def draw_polygon(self,points,fill=True,outline=False):
        if len(points) < 3:
            return
        if fill:
            pts = [self._flip(p) for p in points]
            group = self._group()
            if len(pts) == 3:
                self._keep(shapes.Triangle(pts[0][0],pts[0][1],
                                           pts[1][0],pts[1][1],
                                           pts[2][0],pts[2][1],
                                           color=self.fill_rgba(),
                                           batch=self.__batch,group=group))
            else:
                self._keep(shapes.Polygon(*pts,color=self.fill_rgba(),
                                          batch=self.__batch,group=group))
        if outline:
            self.draw_outline(points)

    def draw_circle(self,p,r,fill=True,outline=True):
        if fill:
            c = self._flip(p)
            self._keep(shapes.Circle(c[0],c[1],r,color=self.fill_rgba(),
                                     batch=self.__batch,group=self._group()))
        if outline:
            res = self.__arcres
            pts = [(p[0]+math.cos(i*2*math.pi/res)*r,
                    p[1]+math.sin(i*2*math.pi/res)*r) for i in range(res)]
            self.draw_polyline(pts,closed=True)

    def draw_text(self,text,location,
                  align='left',
                  attr={}):
        if align not in ('left','center','right'):
            raise ValueError('bad text alignment: {}'.format(align))
        size = attr.get('size',12)
        color = attr.get('color',self.linecolor)
        rgba = tuple(self.thing2color(color,'b')) + (round(self.alpha*255),)
        x,y = self._flip(location)
        self._keep(pyglet.text.Label(text,
                                     font_size=size,
                                     x=x,y=y,
                                     anchor_x=align,
                                     anchor_y='center',
                                     color=rgba,
                                     batch=self.__batch,
                                     group=self._group()))

    ## override base-class virtual display method
    def display(self):
        self.__batch.draw()
        return True
