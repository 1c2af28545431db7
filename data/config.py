RPC_URL = 'https://testnet-rpc.irys.xyz/v1/execution-rpc'

CONTRACT_ADDRESS = '0xbff4ca71606c1a9ee4abde68647d2718d20fe358'
MINT_DATA = '0x1249c58b'  # mint()
GAS_LIMIT = 300000

TOKEN_SYMBOL = 'IRYS'
MIN_BALANCE = 0.001

DELAY_BETWEEN_ACCOUNT = (2, 5)

PRIVATE_KEYS_FILE = 'data/private_keys.txt'
RESULTS_DIR = 'data'

# host:port, None to connect directly
PROXY = None
