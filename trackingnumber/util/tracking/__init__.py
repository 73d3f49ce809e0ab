from trackingnumber.util.tracking.checksum import checksum_remainder
from trackingnumber.util.tracking.checksum import map_to_digit
from trackingnumber.util.tracking.checksum import modified_mod_ten
from trackingnumber.util.tracking.checksum import next_multiple_of_ten
from trackingnumber.util.tracking.checksum import to_digit
