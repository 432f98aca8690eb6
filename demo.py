from keytrust import parse_colons, KeyNotFoundError

# Output of `gpg --list-keys --with-colons --fixed-list-mode`
LISTING = """\
tru::1:1700000000:0:3:1:5
pub:u:4096:1:0123456789ABCDEF:1500000000:::u:::scESC::::::23::0:
fpr:::::::::AAAA0000BBBB1111CCCC22220123456789ABCDEF:
uid:u::::1500000000::HASH1::Alice Example (work) <alice@example.com>::::::::::0:
sub:u:4096:1:FEDCBA9876543210:1500000000::::::e:::::23:
pub:-:2048:1:1111222233334444:1400000000:::-:::scESC::::::23::0:
fpr:::::::::1111111111111111111111111111222233334444:
uid:-::::1400000000::HASH2::Bob <bob@example.com>::::::::::0:
"""

print("--- keytrust Demo ---")

# 1. Parse listing
keys = parse_colons(LISTING)
print(f"[+] Parsed {len(keys)} keys")

# 2. Show keys
for key in keys:
    print(key)
    print()

# 3. Usability
print("[*] Usable recipients:")
for key in keys.usable_keys():
    print(f"    - {key.one_line()}")

print("[*] Usable recipients with always-trust:")
for key in keys.usable_keys(always_trust=True):
    print(f"    - {key.one_line()}")

# 4. Lookup
try:
    key = keys.find_key("bob@example.com")
    print(f"[+] Found Bob: {key.short_id()}")
except KeyNotFoundError as e:
    print(f"[-] {e}")

print("--- Demo Complete ---")
