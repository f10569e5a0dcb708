"""NMEA sentences shared by the test modules."""

# Sentences below carry checksums verified by hand (XOR between '$' and '*').
GLL_SOLENT = "$GPGLL,5057.970,N,00146.328,W,142451,A*3C"
GLL_MUNICH = "$GPGLL,4807.038,N,01131.000,E,123519,A*25"
GLL_SYDNEY = "$GPGLL,3348.456,S,15101.123,W,010203,A*2A"
GGA_MUNICH = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
GGA_SOLENT = "$GPGGA,142451,5057.970,N,00146.328,W,1,08,0.9,10.5,M,46.9,M,,*6A"
GGA_BELOW_SEA = "$GPGGA,000000,0000.000,N,00000.000,E,1,04,1.0,-12.5,M,0.0,M,,*6C"
RMC_MUNICH = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
RMC_SOLENT = "$GPRMC,142451,A,5057.970,N,00146.328,W,0.0,0.0,191026,,*06"
RMC_SOUTH_WEST = "$GPRMC,123519,A,4807.038,S,01131.000,W,022.4,084.4,230394,003.1,W*65"
