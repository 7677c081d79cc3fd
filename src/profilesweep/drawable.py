## base class of drawable surfaces for profilesweep
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved
## See licensing terms here: https://github.com/rdevaul/yapCAD/blob/master/LICENSE

import logging

from PIL import ImageColor

logger = logging.getLogger(__name__)

## Generic drawing functions -- coordinates are screen pixels with the
## origin at the top left corner and y growing downward.  The current
## pen (line color, fill color, width, opacity) applies to every call.

class Drawable:
    """Base class for profilesweep raster surfaces"""

    ## pure virtual functions -- override for specific rendering
    ## system
    def clear(self,color='black'):
        logger.warning("pure virtual clear called: %s",color)

    def draw_line(self,p1,p2):
        logger.warning("pure virtual draw_line called: %s, %s",p1,p2)

    def draw_polygon(self,points,fill=True,outline=False):
        logger.warning("pure virtual draw_polygon called: %s, %s, %s",
                       points,fill,outline)

    def draw_circle(self,p,r,fill=True,outline=True):
        logger.warning("pure virtual draw_circle called: %s, %s",p,r)

    def draw_text(self,text,location,
                  align='left',
                  attr={}):
        logger.warning("pure virtual draw_text called: %s, %s, %s, %s",
                       text,location,align,attr)

    ## non-virtual utility drawing functions
    def draw_polyline(self,points,closed=False):
        for i in range(1,len(points)):
            self.draw_line(points[i-1],points[i])
        if closed and len(points) > 2:
            self.draw_line(points[-1],points[0])

    ## outline of a polygon drawn with the current line pen
    def draw_outline(self,points):
        self.draw_polyline(points,closed=True)

    def __init__(self,width=800,height=600):
        self.__width = 1
        self.__height = 1
        self.resize(width,height)
        self.__linewidth = 1.0
        self.__linecolor = 'black'
        self.__fillcolor = 'white'
        self.__alpha = 1.0

    ## Various property functions

    @property
    def width(self):
        return self.__width

    @property
    def height(self):
        return self.__height

    @property
    def size(self):
        return (self.__width,self.__height)

    def resize(self,width,height):
        if not (isinstance(width,int) and isinstance(height,int)) or \
           width < 1 or height < 1:
            raise ValueError('bad surface size: {}x{}'.format(width,height))
        self.__width = width
        self.__height = height

    @property
    def linewidth(self):
        return self.__linewidth

    def _set_linewidth(self,lw):
        self.__linewidth=lw

    @linewidth.setter
    def linewidth(self,lw):
        if isinstance(lw,bool) or not isinstance(lw,(int,float)) or lw <= 0:
            raise ValueError('invalid linewidth ' + str(lw))
        self._set_linewidth(lw)

    @property
    def alpha(self):
        return self.__alpha

    def _set_alpha(self,a):
        self.__alpha = a

    @alpha.setter
    def alpha(self,a):
        if isinstance(a,bool) or not isinstance(a,(int,float)) or \
           a < 0.0 or a > 1.0:
            raise ValueError('invalid alpha ' + str(a))
        self._set_alpha(float(a))

    ## color can be set as a color name, a CSS-style string ('#rrggbb',
    ## 'hsl(h, s%, l%)', 'rgb(r, g, b)'), or an RGB tripple of bytes
    ## or floats

    def __checkcolor(self,c):
        try:
            self.thing2color(c)
        except ValueError:
            return False
        return True

    ## line color
    @property
    def linecolor(self):
        return self.__linecolor

    def _set_linecolor(self,c):
        self.__linecolor=c

    @linecolor.setter
    def linecolor(self,c):
        if self.__checkcolor(c):
            self._set_linecolor(c)
        else:
            raise ValueError('bad linecolor ' + str(c))

    ## fill color
    @property
    def fillcolor(self):
        return self.__fillcolor

    def _set_fillcolor(self,c):
        self.__fillcolor = c

    @fillcolor.setter
    def fillcolor(self,c):
        if self.__checkcolor(c):
            self._set_fillcolor(c)
        else:
            raise ValueError('bad fillcolor ' + str(c))

    ## non-property methods

    def __repr__(self):
        return 'an abstract Drawable instance'

    ## cause drawing page to be rendered -- pure virtual in base class
    def display(self):
        logger.warning('pure virtual display function called')
        return True

    ## current line and fill colors as byte RGBA tuples, with the
    ## current alpha applied
    def line_rgba(self):
        return tuple(self.thing2color(self.linecolor,'b')) + \
            (round(self.alpha*255),)

    def fill_rgba(self):
        return tuple(self.thing2color(self.fillcolor,'b')) + \
            (round(self.alpha*255),)

    ## function to convert between different color representations
    def thing2color(self,thing,convert='b'):
        def _b2f(c):
            return [c[0] / 255.0, c[1] / 255.0, c[2] / 255.0]

        def _f2b(c):
            return [round(c[0] * 255.0), round(c[1] * 255.0), round(c[2] * 255.0)]

        def _isgoodf(x):
            return isinstance(x,float) and x >= 0.0 and x <= 1.0
        def _isgoodb(x):
            return isinstance(x,int) and not isinstance(x,bool) and \
                x >= 0 and x < 256
        def _isgoodfc(c):
            return isinstance(c,(list,tuple)) and len(c) == 3 and\
                _isgoodf(c[0]) and _isgoodf(c[1]) and _isgoodf(c[2])
        def _isgoodbc(c):
            return isinstance(c,(list,tuple)) and len(c) == 3 and\
                _isgoodb(c[0]) and _isgoodb(c[1]) and _isgoodb(c[2])

        if convert not in ['f','b']:
            raise ValueError('bad color conversion')
        if _isgoodbc(thing):
            c = list(thing)
        elif _isgoodfc(thing):
            c = _f2b(thing)
        elif isinstance(thing,str):
            try:
                c = list(ImageColor.getrgb(thing)[0:3])
            except ValueError:
                raise ValueError('bad color name passed to thing2color: {}'.format(thing)) from None
        else:
            raise ValueError('bad thing passed to thing2color: {}'.format(thing))
        if convert == 'f':
            return _b2f(c)
        return c
