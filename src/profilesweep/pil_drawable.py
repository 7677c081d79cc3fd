## raster drawable for profilesweep using the Pillow imaging library
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

from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

import profilesweep.drawable as drawable

## class to provide raster drawing into an in-memory RGB image.
## Colors are blended with the current alpha, so overlapping
## translucent faces composite in drawing order.
class PilDraw(drawable.Drawable):

    def __init__(self,width=800,height=600,background='black'):
        self.__background = background
        self.__image = None
        self.__draw = None
        super().__init__(width,height)
        self.__font = ImageFont.load_default()

    def __repr__(self):
        return 'an instance of PilDraw'

    @property
    def image(self):
        return self.__image

    def resize(self,width,height):
        super().resize(width,height)
        self.__image = Image.new('RGB',(width,height),
                                 tuple(self.thing2color(self.__background,'b')))
        self.__draw = ImageDraw.Draw(self.__image,'RGBA')

    def _pixelwidth(self):
        return max(1,round(self.linewidth))

    ## Overload virtual profilesweep.drawable base class drawing methods

    def clear(self,color='black'):
        self.__background = color
        rgb = tuple(self.thing2color(color,'b'))
        self.__draw.rectangle([0,0,self.width,self.height],fill=rgb+(255,))

    def draw_line(self,p1,p2):
        self.__draw.line([(p1[0],p1[1]),(p2[0],p2[1])],
                         fill=self.line_rgba(),width=self._pixelwidth())

    def draw_polygon(self,points,fill=True,outline=False):
        xy = [(p[0],p[1]) for p in points]
        if len(xy) < 3:
            return
        if fill:
            self.__draw.polygon(xy,fill=self.fill_rgba())
        if outline:
            self.draw_outline(xy)

    def draw_circle(self,p,r,fill=True,outline=True):
        box = [p[0]-r,p[1]-r,p[0]+r,p[1]+r]
        self.__draw.ellipse(box,
                            fill=self.fill_rgba() if fill else None,
                            outline=self.line_rgba() if outline else None,
                            width=self._pixelwidth())

    def draw_text(self,text,location,
                  align='left',
                  attr={}):
        font = self.__font
        if 'size' in attr:
            font = ImageFont.load_default(size=attr['size'])
        color = attr.get('color',self.linecolor)
        rgba = tuple(self.thing2color(color,'b')) + (round(self.alpha*255),)
        box = self.__draw.textbbox((0,0),text,font=font)
        w = box[2]-box[0]
        h = box[3]-box[1]
        x = location[0]
        y = location[1] - h/2 - box[1]
        if align == 'center':
            x -= w/2
        elif align == 'right':
            x -= w
        elif align != 'left':
            raise ValueError('bad text alignment: {}'.format(align))
        x -= box[0]
        self.__draw.text((x,y),text,fill=rgba,font=font)

    def display(self):
        self.__image.show()
        return True

    def save(self,path):
        path = Path(path)
        self.__image.save(path)
        return path
