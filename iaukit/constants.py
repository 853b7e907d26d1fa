# 2Pi
D2PI = 6.283185307179586476925287

# Arcseconds to radians
DAS2R = 4.848136811095359935899141e-6

# Arcseconds in a full circle
TURNAS = 1296000.0

# Seconds per day
DAYSEC = 86400.0

# Reference epoch (J2000.0), Julian Date
DJ00 = 2451545.0

# Days per Julian century
DJC = 36525.0

# Seconds of time to radians
DS2R = 7.272205216643039903848712e-5
